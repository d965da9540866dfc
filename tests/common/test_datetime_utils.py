from __future__ import annotations

from datetime import datetime, timedelta, timezone

from src.nursery_system.nursery_system.common.datetime_utils import parse_optional_datetime, to_naive_local


def test_blank_values_give_none():
    assert parse_optional_datetime(None) is None
    assert parse_optional_datetime("  ") is None


def test_naive_values_are_kept():
    assert parse_optional_datetime("2026-02-01") == datetime(2026, 2, 1)
    assert parse_optional_datetime("2026-02-01T08:30:00") == datetime(2026, 2, 1, 8, 30)


def test_offset_aware_values_become_naive_local():
    parsed = parse_optional_datetime("2026-02-01T12:00:00+02:00")

    assert parsed.tzinfo is None
    expected = datetime(2026, 2, 1, 10, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert parsed == expected


def test_to_naive_local_preserves_the_instant():
    aware = datetime(2026, 2, 1, 23, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert to_naive_local(aware).astimezone(timezone.utc) == aware
