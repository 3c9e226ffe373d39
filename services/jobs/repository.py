"""
Job repository.

Create, list, get, partially update and remove job postings. The repository
only builds query text and parameter lists; running them is delegated to an
injected QueryExecutor (JobsDB in production, a fake in tests) and building
SET clauses to an injected PartialUpdateBuilder.

Store failures are not caught here.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Final, Optional, Protocol, Union

from psycopg2 import sql

from .errors import BadRequestError, NotFoundError
from .filters import JobFilter, build_where_clause
from .models import Job, JobPatch, NewJob
from .sql_helpers import sql_for_partial_update

logger = logging.getLogger(__name__)

# Patchable fields and the columns they write to. company_handle is not
# updatable.
JOB_UPDATE_FIELDS: Final[Mapping[str, str]] = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}

_JOB_COLUMNS = sql.SQL('title, salary, equity, company_handle AS "companyHandle"')


class QueryExecutor(Protocol):
    def execute(
        self, query: Union[str, sql.Composable], params: Sequence[Any] = ()
    ) -> list[dict[str, Any]]: ...


class PartialUpdateBuilder(Protocol):
    def __call__(
        self, data: Mapping[str, Any], js_to_sql: Mapping[str, str]
    ) -> tuple[sql.Composable, list[Any]]: ...


class JobRepository:
    """
    Data access for the jobs table.

    Holds no state besides its collaborators; every operation is a single
    statement.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        update_builder: PartialUpdateBuilder = sql_for_partial_update,
        *,
        empty_list_is_error: bool = True,
    ):
        """
        Args:
            executor: Runs queries and returns rows as dicts
            update_builder: Builds the SET clause for update()
            empty_list_is_error: When True, find_all() raises BadRequestError
                                 instead of returning an empty list
        """
        self.executor = executor
        self.update_builder = update_builder
        self.empty_list_is_error = empty_list_is_error

    def create(self, data: NewJob) -> Job:
        """
        Insert a job and return it, including its generated id.

        No validation happens here: an unknown company handle or a missing
        title surfaces as the store's constraint error.
        """
        rows = self.executor.execute(
            sql.SQL(
                """INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES (%s, %s, %s, %s)
                RETURNING id, {columns}"""
            ).format(columns=_JOB_COLUMNS),
            [data.title, data.salary, data.equity, data.company_handle],
        )
        job = Job.from_row(rows[0])

        logger.debug("Created job", extra={"job_id": job.id, "company_handle": job.company_handle})

        return job

    def find_all(self, job_filter: Optional[JobFilter] = None) -> list[Job]:
        """
        List jobs matching every active filter, ordered by title.

        Returned jobs do not carry an id.

        Raises:
            BadRequestError: If nothing matches and empty_list_is_error is set
        """
        where_clause, params = build_where_clause(job_filter)

        query_parts = [
            sql.SQL("SELECT {columns} FROM jobs").format(columns=_JOB_COLUMNS),
            where_clause,
            sql.SQL(" ORDER BY title"),
        ]

        rows = self.executor.execute(sql.SQL("").join(query_parts), params)

        logger.debug(
            "Listed jobs",
            extra={
                "count": len(rows),
                "filtered": job_filter is not None and job_filter.is_active,
            },
        )

        if not rows and self.empty_list_is_error:
            raise BadRequestError("No jobs found")

        return [Job.from_row(row) for row in rows]

    def get(self, job_id: int) -> Job:
        """
        Fetch one job by id (returned without its id).

        Raises:
            NotFoundError: If no job has this id
        """
        rows = self.executor.execute(
            sql.SQL("SELECT {columns} FROM jobs WHERE id = %s").format(columns=_JOB_COLUMNS),
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job found with id of {job_id}")

        return Job.from_row(rows[0])

    def update(self, job_id: int, data: Union[JobPatch, Mapping[str, Any]]) -> Job:
        """
        Partially update a job; only the given fields change.

        data may hold title, salary and equity. It is fine if it doesn't
        contain all of them.

        Raises:
            BadRequestError: If data has fields that cannot be patched, or
                             none at all
            NotFoundError: If no job has this id
        """
        if isinstance(data, JobPatch):
            data = data.to_data()

        disallowed = sorted(set(data) - set(JOB_UPDATE_FIELDS))
        if disallowed:
            raise BadRequestError(f"Cannot update field(s): {', '.join(disallowed)}")

        set_cols, values = self.update_builder(data, JOB_UPDATE_FIELDS)

        rows = self.executor.execute(
            sql.SQL(
                """UPDATE jobs
                SET {set_cols}
                WHERE id = %s
                RETURNING {columns}"""
            ).format(set_cols=set_cols, columns=_JOB_COLUMNS),
            [*values, job_id],
        )
        if not rows:
            raise NotFoundError(f"No job found with id of {job_id}")

        logger.debug("Updated job", extra={"job_id": job_id, "fields": list(data)})

        return Job.from_row(rows[0])

    def remove(self, job_id: int) -> None:
        """
        Delete a job.

        Raises:
            NotFoundError: If no job has this id
        """
        rows = self.executor.execute(
            "DELETE FROM jobs WHERE id = %s RETURNING id",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job found with id of {job_id}")

        logger.debug("Removed job", extra={"job_id": job_id})
