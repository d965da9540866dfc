"""Pure filtering and statistics over notification lists."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import enum_value
from .model import Notification, NotificationFilter, NotificationStats


def filter_notifications(
    notifications: Sequence[Notification],
    criteria: Optional[NotificationFilter] = None,
) -> list[Notification]:
    """Notifications matching every given criterion, in their original order."""
    if criteria is None:
        return list(notifications)

    wanted_type = enum_value(criteria.type) if criteria.type else None
    wanted_priority = enum_value(criteria.priority) if criteria.priority else None
    term = criteria.search.lower() if criteria.search else None

    def matches(n: Notification) -> bool:
        if wanted_type and n.type != wanted_type:
            return False
        if wanted_priority and n.priority != wanted_priority:
            return False
        if criteria.unread_only and n.is_read:
            return False
        if term and term not in n.title.lower() and term not in n.message.lower():
            return False
        if criteria.date_range and n.created_at not in criteria.date_range:
            return False
        return True

    return [n for n in notifications if matches(n)]


def notification_stats(notifications: Iterable[Notification]) -> NotificationStats:
    total = 0
    unread = 0
    by_type: dict[str, int] = {}
    by_priority: dict[str, int] = {}

    for n in notifications:
        total += 1
        if not n.is_read:
            unread += 1
        by_type[n.type] = by_type.get(n.type, 0) + 1
        by_priority[n.priority] = by_priority.get(n.priority, 0) + 1

    return NotificationStats(
        total=total,
        unread=unread,
        read=total - unread,
        by_type=by_type,
        by_priority=by_priority,
    )
