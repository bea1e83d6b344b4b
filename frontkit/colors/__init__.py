"""
Color format conversion and random palette selection.
"""
