from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_naive_local(value: datetime) -> datetime:
    """Offset-aware values are converted to local time and stripped of tzinfo.

    MySQL DATETIME columns come back naive, so comparisons need naive values.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_optional_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO date or datetime string into naive local time.

    Empty values give None; a bare date is read as midnight of that day.
    """
    if not value or not value.strip():
        return None
    return to_naive_local(datetime.fromisoformat(value.strip()))


def end_of_day(value: date) -> datetime:
    return datetime.combine(value, datetime.max.time())


def now_local() -> datetime:
    """Current local time (naive). Patch this in tests to freeze the clock."""
    return datetime.now()
