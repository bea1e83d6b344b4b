"""
frontkit – small, independent helpers for application code.

Safe key/value storage wrappers, date parsing/formatting and relative period
boundaries, color conversion and palette picking, numeric validation and
formatting, query-string serialization, type guards and thin desktop/network
helpers.
"""
