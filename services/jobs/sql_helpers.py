"""
SQL fragment helpers.

Only structural text (column names, placeholders) is assembled here, with
psycopg2's ``sql`` module quoting identifiers. Values always travel
separately as bound parameters.
"""

from collections.abc import Mapping
from typing import Any

from psycopg2 import sql

from .errors import BadRequestError


def sql_for_partial_update(
    data: Mapping[str, Any], js_to_sql: Mapping[str, str]
) -> tuple[sql.Composed, list[Any]]:
    """
    Build the SET clause of a partial UPDATE.

    Args:
        data: Fields to change, e.g. {"title": "Engineer", "salary": 95000}
        js_to_sql: Maps field names to column names; unmapped fields use
                   their own name

    Returns:
        Tuple of (set_cols, values), where set_cols renders as
        '"title"=%s, "salary"=%s' and values lines up with the placeholders

    Raises:
        BadRequestError: If data is empty

    Example:
        >>> set_cols, values = sql_for_partial_update(
        ...     {"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        >>> set_cols.as_string(conn)
        '"first_name"=%s, "age"=%s'
        >>> values
        ['Aliya', 32]
    """
    if not data:
        raise BadRequestError("No data")

    cols = [
        sql.SQL("{}=%s").format(sql.Identifier(js_to_sql.get(name, name)))
        for name in data
    ]

    return sql.SQL(", ").join(cols), list(data.values())
