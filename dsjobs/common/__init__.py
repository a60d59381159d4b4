"""
Common utilities shared across DS-Jobs services.

This package is intentionally small and focused on pure, dependency-light
helpers that are reused by multiple services (e.g., job family
extraction).
"""
