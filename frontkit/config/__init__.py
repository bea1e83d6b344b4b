"""
Configuration loading and validation.

Provides strongly typed settings objects for storage paths, formatting
defaults and network behaviour, loaded from environment variables.
"""
