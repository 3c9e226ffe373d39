"""
Error types for the jobs service.

Each error carries a ``status`` so that whatever boundary consumes the
repository (CLI, HTTP layer) can map it to a response:

- NotFoundError   -> 404 "not found"
- BadRequestError -> 400 "invalid request"
- anything else   -> 500 "internal error"

Store failures (``psycopg2.Error``) are not wrapped here; they
propagate to the caller unchanged.
"""


class JobsError(Exception):
    """Base class for errors raised by the jobs service."""

    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(JobsError):
    """Raised when the targeted job does not exist."""

    status = 404


class BadRequestError(JobsError):
    """Raised when a request cannot be served as given."""

    status = 400


def error_status(exc: BaseException) -> int:
    """Return the boundary status code for an exception."""
    if isinstance(exc, JobsError):
        return exc.status
    return 500
