"""
Query-string serialization.
"""
