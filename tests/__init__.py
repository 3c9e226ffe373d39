"""Jobly Test Suite.

This package contains unit and integration tests for the Jobly services.

Test Structure:
- unit/: Unit tests for individual functions and classes (no database)
- integration/: Tests against a disposable PostgreSQL database
"""

__version__ = "0.1.0"
