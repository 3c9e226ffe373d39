"""
Jobs Service

Data access for job postings stored in the ``jobs`` table (each job belongs
to a company through ``company_handle``).

Key responsibilities:
- Create, list (with title / minimum salary / equity filters), fetch,
  partially update and remove jobs
- Report missing jobs and invalid requests with typed errors
"""

from .errors import BadRequestError, JobsError, NotFoundError
from .filters import JobFilter
from .models import Job, JobPatch, NewJob
from .repository import JobRepository

__version__ = "0.1.0"

__all__ = [
    "BadRequestError",
    "Job",
    "JobFilter",
    "JobPatch",
    "JobRepository",
    "JobsError",
    "NewJob",
    "NotFoundError",
]
