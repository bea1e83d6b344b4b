"""
Fail-safe key/value storage helpers and the non-throwing JSON codec they use.
"""
