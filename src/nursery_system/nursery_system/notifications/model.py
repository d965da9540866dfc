from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import NotificationPriority, NotificationType, enum_value


@dataclass(frozen=True)
class NotificationDraft:
    """Content of a notification before it is addressed and stored."""

    title: str
    message: str
    type: str = NotificationType.INFO.value
    priority: str = NotificationPriority.MEDIUM.value

    def __post_init__(self):
        object.__setattr__(self, "type", enum_value(self.type))
        object.__setattr__(self, "priority", enum_value(self.priority))


@dataclass(frozen=True)
class Notification:
    notification_id: int
    title: str
    message: str
    type: str
    priority: str
    is_read: bool
    created_at: datetime
    user_id: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "type", enum_value(self.type))
        object.__setattr__(self, "priority", enum_value(self.priority))

    def to_dict(self) -> dict:
        return {
            "id": self.notification_id,
            "title": self.title,
            "message": self.message,
            "type": self.type,
            "priority": self.priority,
            "is_read": self.is_read,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class DateRange:
    """Inclusive [start, end] bound on ``created_at``."""

    start: datetime
    end: datetime

    def __contains__(self, value: datetime) -> bool:
        return self.start <= value <= self.end


@dataclass(frozen=True)
class NotificationFilter:
    type: Optional[str] = None
    priority: Optional[str] = None
    unread_only: bool = False
    search: Optional[str] = None
    date_range: Optional[DateRange] = None


@dataclass(frozen=True)
class NotificationStats:
    total: int
    unread: int
    read: int
    by_type: dict[str, int] = field(default_factory=dict)
    by_priority: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "unread": self.unread,
            "read": self.read,
            "by_type": dict(self.by_type),
            "by_priority": dict(self.by_priority),
        }
