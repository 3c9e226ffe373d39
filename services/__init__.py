"""Jobly Services Package.

This package contains the services of the Jobly backend:
- jobs: Data access for job postings (create, filtered listing, fetch,
  partial update, remove)
"""

__version__ = "0.1.0"
