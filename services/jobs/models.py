"""
Data shapes for the jobs service.

Rows come back from PostgreSQL as dicts (``RealDictCursor``) with the
company handle aliased to ``companyHandle``; ``Job.from_row`` turns them into
dataclasses and ``Job.to_dict`` renders the wire shape again.
"""

from dataclasses import dataclass, field, fields
from decimal import Decimal
from typing import Any, Optional

_UNSET: Any = object()


@dataclass
class Job:
    """A job posting.

    ``id`` is None for shapes that do not select it (listing, get, update).
    """

    title: str
    salary: Optional[int]
    equity: Optional[Decimal]
    company_handle: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Job":
        equity = row.get("equity")
        if equity is not None and not isinstance(equity, Decimal):
            equity = Decimal(str(equity))
        return cls(
            title=row["title"],
            salary=row.get("salary"),
            equity=equity,
            company_handle=row["companyHandle"],
            id=row.get("id"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the camel-cased shape; NUMERIC equity is kept as text."""
        data: dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data["title"] = self.title
        data["salary"] = self.salary
        data["equity"] = str(self.equity) if self.equity is not None else None
        data["companyHandle"] = self.company_handle
        return data


@dataclass
class NewJob:
    """Input for creating a job. All four fields are required by contract."""

    title: str
    salary: Optional[int]
    equity: Optional[Decimal]
    company_handle: str


@dataclass
class JobPatch:
    """Input for a partial update.

    Only fields that were explicitly given are written, so ``JobPatch(salary=None)``
    clears the salary while ``JobPatch()`` changes nothing.
    """

    title: Any = field(default=_UNSET)
    salary: Any = field(default=_UNSET)
    equity: Any = field(default=_UNSET)

    def to_data(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not _UNSET
        }
