"""Helpers for building parameterized SQL text.

Statements use ``$1, $2, ...`` positional placeholders; values always travel
separately in a list whose order matches the placeholder numbers.
"""
from typing import Any, Collection, Mapping, NamedTuple, Optional

from core.errors import InvalidFieldError, NoFieldsError


class PartialUpdate(NamedTuple):
    set_cols: str
    values: list[Any]


class SearchQuery(NamedTuple):
    query: str
    values: list[Any]


def sql_for_partial_update(
    data: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
    allowed: Optional[Collection[str]] = None,
) -> PartialUpdate:
    """Build the SET clause of an UPDATE from the fields a client sent.

    ``data`` maps public field names to new values, e.g.
    ``{"firstName": "Aliya", "age": 32}``. ``js_to_sql`` maps the public
    names that differ from their column, e.g. ``{"firstName": "first_name"}``;
    names missing from it are used as the column name as they are.

    Column names are spliced into the statement, so they must come from a
    trusted list: pass ``allowed`` with the resource's updatable fields and
    any other key raises ``InvalidFieldError``.

        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
        ...                        {"firstName": "first_name"})
        PartialUpdate(set_cols='"first_name"=$1, "age"=$2', values=['Aliya', 32])

    Raises ``NoFieldsError`` when ``data`` is empty.
    """
    keys = list(data)
    if not keys:
        raise NoFieldsError()

    if allowed is not None:
        unknown = [k for k in keys if k not in allowed]
        if unknown:
            raise InvalidFieldError(f"Cannot update field(s): {', '.join(unknown)}")

    cols = [f'"{js_to_sql.get(col, col)}"=${idx}' for idx, col in enumerate(keys, start=1)]
    return PartialUpdate(set_cols=", ".join(cols), values=[data[k] for k in keys])
