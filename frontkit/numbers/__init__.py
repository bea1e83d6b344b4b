"""
Numeric validation, secure random integers and thousand-separator formatting.
"""
