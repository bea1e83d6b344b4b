"""
Runtime type guards.
"""
