from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_NOTIFICATION_LIMIT, NOTIFICATION_RETENTION_DAYS
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..core.logger import get_logger
from ..users.repository import UserRepository
from .filters import filter_notifications, notification_stats
from .model import Notification, NotificationDraft, NotificationFilter, NotificationStats
from .preferences import NotificationPreferences, load_preferences, update_preferences
from .repository import NotificationRepository

log = get_logger(__name__)


class NotificationService:
    def __init__(
        self,
        notifications: NotificationRepository,
        users: UserRepository,
        *,
        retention_days: int = NOTIFICATION_RETENTION_DAYS,
    ):
        self._notifications = notifications
        self._users = users
        self._retention_days = int(retention_days)

    def _check(self, draft: NotificationDraft) -> None:
        if not isinstance(draft.title, str) or not draft.title.strip():
            raise ValidationError("Notification title is required")
        if not isinstance(draft.message, str) or not draft.message.strip():
            raise ValidationError("Notification message is required")

    def notify_user(
        self,
        user_id: int,
        draft: NotificationDraft,
        *,
        preferences: Optional[NotificationPreferences] = None,
    ) -> Optional[int]:
        """Store ``draft`` for one user; None when their preferences mute it.

        Stored preferences are used unless ``preferences`` is given.
        """
        self._check(draft)
        if preferences is None:
            preferences = self.preferences_for(user_id)
        if not preferences.allows(draft):
            log.debug("Notification %r muted by preferences of user %s", draft.type, user_id)
            return None
        return self._notifications.create(user_id=user_id, draft=draft)

    def notify_users(self, user_ids: Sequence[int], draft: NotificationDraft) -> int:
        """Store ``draft`` once per distinct user, skipping users who muted it."""
        self._check(draft)
        unique_ids = list(dict.fromkeys(int(uid) for uid in user_ids))
        stored = self._notifications.get_preferences_many(unique_ids)
        recipients = [uid for uid in unique_ids if load_preferences(stored.get(uid)).allows(draft)]
        if len(recipients) < len(unique_ids):
            log.debug("Notification %r muted for %d users", draft.type, len(unique_ids) - len(recipients))
        if not recipients:
            return 0
        return self._notifications.create_many(user_ids=recipients, draft=draft)

    def notify_role(self, role: Role, draft: NotificationDraft) -> int:
        user_ids = self._users.list_active_ids_by_role(role)
        sent = self.notify_users(user_ids, draft)
        log.info("Sent %r notification to %d %s users", draft.type, sent, role.value)
        return sent

    def list_for_user(
        self,
        user_id: int,
        criteria: Optional[NotificationFilter] = None,
        *,
        limit: int = DEFAULT_NOTIFICATION_LIMIT,
    ) -> list[Notification]:
        rows = self._notifications.list_for_user(user_id, limit=limit)
        return filter_notifications(rows, criteria)

    def stats_for_user(self, user_id: int, *, limit: int = DEFAULT_NOTIFICATION_LIMIT) -> NotificationStats:
        return notification_stats(self._notifications.list_for_user(user_id, limit=limit))

    def mark_as_read(self, notification_ids: Sequence[int], *, user_id: int) -> int:
        return self._notifications.mark_read(notification_ids=list(notification_ids), user_id=user_id)

    def unread_count(self, user_id: int) -> int:
        return self._notifications.count_unread(user_id)

    def preferences_for(self, user_id: int) -> NotificationPreferences:
        return load_preferences(self._notifications.get_preferences(user_id))

    def update_preferences_for(self, user_id: int, changes) -> NotificationPreferences:
        updated = update_preferences(self.preferences_for(user_id), changes)
        self._notifications.save_preferences(user_id, updated.to_json())
        log.info("Updated notification preferences of user %s", user_id)
        return updated

    def cleanup_old(self, *, now: Optional[datetime] = None) -> int:
        """Delete read notifications older than the retention window."""
        now = now or now_local()
        cutoff = now - timedelta(days=self._retention_days)
        deleted = self._notifications.delete_read_before(cutoff)
        log.info("Removed %d read notifications created before %s", deleted, cutoff.isoformat(timespec="seconds"))
        return deleted
