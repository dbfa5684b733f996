import logging
from typing import Any, Mapping
from sqlalchemy.orm import Session

from core.database import run_query
from core.errors import DuplicateKeyError, InvalidFilterError, NotFoundError
from helpers.sql import SearchQuery, sql_for_partial_update
from .schema import OrganizationCreate, OrganizationFilter

log = logging.getLogger("openings.organizations")

# public name -> column, for names that differ
JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}
UPDATABLE_FIELDS = frozenset({"name", "description", "numEmployees", "logoUrl"})

_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'


def build_organization_search(filters: OrganizationFilter) -> SearchQuery:
    """SELECT for the organization list, narrowed by the optional filters.

    Filters are applied in a fixed order (min, max, name) so placeholder
    numbering is the same for the same input. Raises ``InvalidFilterError``
    when both bounds are given and min is greater than max.
    """
    if (
        filters.min_employees is not None
        and filters.max_employees is not None
        and filters.min_employees > filters.max_employees
    ):
        raise InvalidFilterError("Min employees cannot be greater than max")

    query = f"SELECT {_COLUMNS} FROM organizations"
    values: list[Any] = []
    where: list[str] = []

    if filters.min_employees is not None:
        values.append(filters.min_employees)
        where.append(f"num_employees >= ${len(values)}")

    if filters.max_employees is not None:
        values.append(filters.max_employees)
        where.append(f"num_employees <= ${len(values)}")

    if filters.name is not None:
        values.append(f"%{filters.name}%")
        where.append(f"name ILIKE ${len(values)}")

    if where:
        query += " WHERE " + " AND ".join(where)
    query += " ORDER BY name"
    return SearchQuery(query, values)


def list_organizations(db: Session, filters: OrganizationFilter | None = None) -> list[dict]:
    query, values = build_organization_search(filters or OrganizationFilter())
    return run_query(db, query, values)


def get_organization(db: Session, handle: str) -> dict:
    """Organization plus its positions; ``NotFoundError`` if the handle is unknown."""
    rows = run_query(
        db,
        f"""SELECT {_COLUMNS}
            FROM organizations
            WHERE handle = $1""",
        [handle],
    )
    if not rows:
        raise NotFoundError(f"No organization: {handle}")
    org = rows[0]

    org["positions"] = run_query(
        db,
        """SELECT id, title, salary, equity
           FROM positions
           WHERE organization_handle = $1
           ORDER BY id""",
        [handle],
    )
    return org


def create_organization(db: Session, dto: OrganizationCreate) -> dict:
    duplicate = run_query(db, "SELECT handle FROM organizations WHERE handle = $1", [dto.handle])
    if duplicate:
        raise DuplicateKeyError(f"Duplicate organization: {dto.handle}")

    rows = run_query(
        db,
        f"""INSERT INTO organizations (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {_COLUMNS}""",
        [dto.handle, dto.name, dto.description, dto.num_employees, dto.logo_url],
    )
    log.info("organization created handle=%s", dto.handle)
    return rows[0]


def update_organization(db: Session, handle: str, data: Mapping[str, Any]) -> dict:
    """Partial update: only the fields present in ``data`` change.

    ``data`` uses public names (``numEmployees``, ``logoUrl``...). Raises
    ``NoFieldsError`` when empty and ``NotFoundError`` if the handle is unknown.
    """
    set_cols, values = sql_for_partial_update(data, JS_TO_SQL, allowed=UPDATABLE_FIELDS)
    handle_idx = len(values) + 1

    rows = run_query(
        db,
        f"""UPDATE organizations
            SET {set_cols}
            WHERE handle = ${handle_idx}
            RETURNING {_COLUMNS}""",
        [*values, handle],
    )
    if not rows:
        raise NotFoundError(f"No organization: {handle}")
    return rows[0]


def remove_organization(db: Session, handle: str) -> None:
    rows = run_query(db, "DELETE FROM organizations WHERE handle = $1 RETURNING handle", [handle])
    if not rows:
        raise NotFoundError(f"No organization: {handle}")
    log.info("organization removed handle=%s", handle)
