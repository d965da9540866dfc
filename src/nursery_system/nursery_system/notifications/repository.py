from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional, Protocol, Sequence

from .model import Notification, NotificationDraft


class NotificationRepository(Protocol):
    def create(self, *, user_id: int, draft: NotificationDraft) -> int:
        raise NotImplementedError

    def create_many(self, *, user_ids: Sequence[int], draft: NotificationDraft) -> int:
        """Insert one copy of ``draft`` per user; returns the number stored."""
        raise NotImplementedError

    def list_for_user(self, user_id: int, *, limit: int) -> Sequence[Notification]:
        """Newest first."""
        raise NotImplementedError

    def mark_read(self, *, notification_ids: Sequence[int], user_id: int) -> int:
        """Only rows owned by ``user_id`` are touched."""
        raise NotImplementedError

    def count_unread(self, user_id: int) -> int:
        raise NotImplementedError

    def delete_read_before(self, cutoff: datetime) -> int:
        raise NotImplementedError

    def get_preferences(self, user_id: int) -> Optional[str]:
        """Stored preferences JSON document, or None."""
        raise NotImplementedError

    def get_preferences_many(self, user_ids: Sequence[int]) -> Mapping[int, str]:
        """Stored documents keyed by user id; users without one are left out."""
        raise NotImplementedError

    def save_preferences(self, user_id: int, document: str) -> None:
        raise NotImplementedError
