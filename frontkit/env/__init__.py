"""
Thin wrappers around the desktop browser, timers and file downloads.
"""
