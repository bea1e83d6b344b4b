"""
Generic utilities shared across modules.

Includes the clock abstraction used for deterministic time in tests.
"""
