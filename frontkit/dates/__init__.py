"""
Date parsing, locale-aware formatting and relative period boundaries.
"""
