"""DS-Jobs Cleaning Test Suite.

This package contains unit and integration tests for the DS-Jobs project.

Test Structure:
- unit/: Unit tests for individual functions and classes
- integration/: Integration tests against a real PostgreSQL database
"""
