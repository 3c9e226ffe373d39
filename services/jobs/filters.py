"""
Listing filters for jobs.

Filters are combined by accumulation: each active filter contributes one
predicate and (at most) one bound value, and the predicates are joined with
AND. Any subset of {title, min_salary, has_equity} is therefore supported
without enumerating the combinations.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from psycopg2 import sql

from .errors import BadRequestError

# Query-string keys accepted by JobFilter.from_query
QUERY_KEYS = ("title", "minSalary", "hasEquity")


@dataclass
class JobFilter:
    """Optional listing filters.

    title:      case-insensitive substring match
    min_salary: inclusive lower bound on salary
    has_equity: when True, only jobs with equity > 0; False imposes nothing
    """

    title: Optional[str] = None
    min_salary: Optional[int] = None
    has_equity: bool = False

    @property
    def is_active(self) -> bool:
        return bool(self.title) or self.min_salary is not None or self.has_equity

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> "JobFilter":
        """
        Build a filter from raw query-string values.

        Blank values count as absent. hasEquity is only on for "true"
        (any case) or a real True.

        Raises:
            BadRequestError: On unknown keys or a minSalary that is not a
                             non-negative integer
        """
        unknown = sorted(set(params) - set(QUERY_KEYS))
        if unknown:
            raise BadRequestError(f"Unknown filter(s): {', '.join(unknown)}")

        title = params.get("title")
        if isinstance(title, str):
            title = title.strip() or None

        min_salary = params.get("minSalary")
        if isinstance(min_salary, str) and not min_salary.strip():
            min_salary = None
        if min_salary is not None:
            # int() would truncate 12.5 and accept True as 1
            if isinstance(min_salary, bool) or not isinstance(min_salary, (int, str)):
                raise BadRequestError(f"minSalary must be an integer, got {min_salary!r}")
            try:
                min_salary = int(min_salary)
            except (TypeError, ValueError) as e:
                raise BadRequestError(f"minSalary must be an integer, got {min_salary!r}") from e
            if min_salary < 0:
                raise BadRequestError("minSalary must not be negative")

        has_equity = params.get("hasEquity")
        if isinstance(has_equity, str):
            has_equity = has_equity.strip().lower() == "true"

        return cls(title=title, min_salary=min_salary, has_equity=has_equity is True)


def build_where_clause(job_filter: Optional[JobFilter]) -> tuple[sql.Composable, list[Any]]:
    """
    Accumulate the WHERE clause for a filter.

    Returns:
        Tuple of (clause, params). clause is empty when no filter is active,
        otherwise it renders as " WHERE <p1> AND <p2> ..." with %s
        placeholders in the same order as params.

    Example:
        >>> clause, params = build_where_clause(JobFilter(min_salary=80000, has_equity=True))
        >>> clause.as_string(conn), params
        (' WHERE salary >= %s AND equity > 0', [80000])
    """
    if job_filter is None or not job_filter.is_active:
        return sql.SQL(""), []

    conditions: list[sql.Composable] = []
    params: list[Any] = []

    if job_filter.title:
        conditions.append(sql.SQL("title ILIKE %s"))
        params.append(f"%{job_filter.title}%")

    if job_filter.min_salary is not None:
        conditions.append(sql.SQL("salary >= %s"))
        params.append(job_filter.min_salary)

    if job_filter.has_equity:
        conditions.append(sql.SQL("equity > 0"))

    return sql.SQL(" WHERE ") + sql.SQL(" AND ").join(conditions), params
