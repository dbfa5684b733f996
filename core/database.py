import logging
import re
from typing import Any, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from core.config_loader import settings

log = logging.getLogger("openings.sql")

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True, future=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


class Base(DeclarativeBase):
    pass


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# $1, $2, ... positional placeholders used by the statement builders
_PLACEHOLDER = re.compile(r"\$(\d+)")


def bind_positional(sql: str, values: Sequence[Any]) -> tuple[str, dict[str, Any]]:
    """Rewrite ``$n`` placeholders into SQLAlchemy named binds.

    ``"name" = $1`` becomes ``"name" = :p1`` and the values become
    ``{"p1": ...}``. Every placeholder must have a value.
    """
    params = {f"p{i}": v for i, v in enumerate(values, start=1)}

    def _sub(m: re.Match) -> str:
        key = f"p{m.group(1)}"
        if key not in params:
            raise ValueError(f"no value bound for placeholder ${m.group(1)}")
        return f":{key}"

    return _PLACEHOLDER.sub(_sub, sql), params


def run_query(db: Session, sql: str, values: Sequence[Any] = ()) -> list[dict[str, Any]]:
    """Execute one statement and commit it; return the rows as dicts.

    Store errors roll the session back and propagate unchanged.
    """
    stmt, params = bind_positional(sql, values)
    log.debug("sql=%s params=%s", " ".join(stmt.split()), params)
    try:
        result = db.execute(text(stmt), params)
        rows = [dict(r) for r in result.mappings()] if result.returns_rows else []
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return rows
