from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .connection import DatabaseConnection

Row = Dict[str, Any]


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, write: bool = False) -> Iterator[Tuple[Any, Any]]:
    """Yield ``(connection, dict cursor)``.

    With ``write=True`` the work is committed on success and rolled back on
    any error; reads never commit.
    """
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=True)
    try:
        yield conn, cur
        if write:
            conn.commit()
    except Exception:
        if write:
            conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def fetchone(cur) -> Optional[Row]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Row]:
    return list(cur.fetchall() or [])


def in_clause(values: Sequence[Any]) -> str:
    """Placeholder list for ``IN (...)``; callers must pass a non-empty sequence."""
    if not values:
        raise ValueError("in_clause() needs at least one value")
    return ", ".join(["%s"] * len(values))


def normalize_mysql_date(value: Any) -> Optional[date]:
    """DATE columns may come back as date, datetime or 'YYYY-MM-DD' text."""
    if value is None or isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Unsupported MySQL DATE value type: {type(value)!r}")
