import logging
from typing import Any, Mapping
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from core.database import run_query
from core.errors import DuplicateKeyError, NotFoundError
from helpers.sql import SearchQuery, sql_for_partial_update
from .schema import PositionCreate, PositionFilter

log = logging.getLogger("openings.positions")

# every updatable name is also its column name
JS_TO_SQL: dict[str, str] = {}
UPDATABLE_FIELDS = frozenset({"title", "salary", "equity"})

_COLUMNS = 'id, title, salary, equity, organization_handle AS "organizationHandle"'


def build_position_search(filters: PositionFilter) -> SearchQuery:
    """SELECT for the position list.

    - min_salary: salary at least this much
    - title: case-insensitive substring match
    - has_equity: when true, only positions with equity above zero
    """
    query = f"SELECT {_COLUMNS} FROM positions"
    values: list[Any] = []
    where: list[str] = []

    if filters.min_salary is not None:
        values.append(filters.min_salary)
        where.append(f"salary >= ${len(values)}")

    if filters.title is not None:
        values.append(f"%{filters.title}%")
        where.append(f"title ILIKE ${len(values)}")

    if filters.has_equity is True:
        where.append("equity > 0")

    if where:
        query += " WHERE " + " AND ".join(where)
    query += " ORDER BY organization_handle, id"
    return SearchQuery(query, values)


def list_positions(db: Session, filters: PositionFilter | None = None) -> list[dict]:
    query, values = build_position_search(filters or PositionFilter())
    return run_query(db, query, values)


def create_position(db: Session, dto: PositionCreate) -> dict:
    try:
        rows = run_query(
            db,
            f"""INSERT INTO positions (title, salary, equity, organization_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {_COLUMNS}""",
            [dto.title, dto.salary, dto.equity, dto.organization_handle],
        )
    except IntegrityError as e:
        log.info("position rejected by store constraint handle=%s", dto.organization_handle)
        raise DuplicateKeyError(f"Position conflicts with stored data: {dto.title}") from e
    log.info("position created id=%s handle=%s", rows[0]["id"], dto.organization_handle)
    return rows[0]


def update_position(db: Session, position_id: int, data: Mapping[str, Any]) -> dict:
    set_cols, values = sql_for_partial_update(data, JS_TO_SQL, allowed=UPDATABLE_FIELDS)
    id_idx = len(values) + 1

    rows = run_query(
        db,
        f"""UPDATE positions
            SET {set_cols}
            WHERE id = ${id_idx}
            RETURNING {_COLUMNS}""",
        [*values, position_id],
    )
    if not rows:
        raise NotFoundError(f"No position: {position_id}")
    return rows[0]


def remove_position(db: Session, position_id: int) -> None:
    rows = run_query(db, "DELETE FROM positions WHERE id = $1 RETURNING id", [position_id])
    if not rows:
        raise NotFoundError(f"No position: {position_id}")
    log.info("position removed id=%s", position_id)
