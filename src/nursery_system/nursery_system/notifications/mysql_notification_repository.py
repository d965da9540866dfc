from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import Notification, NotificationDraft
from .repository import NotificationRepository


class MySQLNotificationRepository(NotificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, user_id: int, draft: NotificationDraft) -> int:
        with db_cursor(self._conn_factory, write=True) as (_, cur):
            cur.execute(
                """
                INSERT INTO notifications(user_id, title, message, type, priority, is_read)
                VALUES(%s,%s,%s,%s,%s,0)
                """,
                (user_id, draft.title, draft.message, draft.type, draft.priority),
            )
            return int(cur.lastrowid)

    def create_many(self, *, user_ids: Sequence[int], draft: NotificationDraft) -> int:
        if not user_ids:
            return 0
        with db_cursor(self._conn_factory, write=True) as (_, cur):
            cur.executemany(
                """
                INSERT INTO notifications(user_id, title, message, type, priority, is_read)
                VALUES(%s,%s,%s,%s,%s,0)
                """,
                [(int(uid), draft.title, draft.message, draft.type, draft.priority) for uid in user_ids],
            )
            return len(user_ids)

    def list_for_user(self, user_id: int, *, limit: int) -> Sequence[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT notification_id, user_id, title, message, type, priority, is_read, created_at
                FROM notifications
                WHERE user_id=%s
                ORDER BY created_at DESC, notification_id DESC
                LIMIT %s
                """,
                (user_id, int(limit)),
            )
            return [
                Notification(
                    notification_id=int(r["notification_id"]),
                    user_id=int(r["user_id"]),
                    title=r["title"],
                    message=r["message"],
                    type=r["type"],
                    priority=r["priority"],
                    is_read=bool(r["is_read"]),
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]

    def mark_read(self, *, notification_ids: Sequence[int], user_id: int) -> int:
        if not notification_ids:
            return 0
        ids = [int(i) for i in notification_ids]
        with db_cursor(self._conn_factory, write=True) as (_, cur):
            cur.execute(
                f"UPDATE notifications SET is_read=1 WHERE user_id=%s AND notification_id IN ({in_clause(ids)})",
                (user_id, *ids),
            )
            return int(cur.rowcount)

    def count_unread(self, user_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM notifications WHERE user_id=%s AND is_read=0", (user_id,))
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def delete_read_before(self, cutoff: datetime) -> int:
        with db_cursor(self._conn_factory, write=True) as (_, cur):
            cur.execute("DELETE FROM notifications WHERE is_read=1 AND created_at < %s", (cutoff,))
            return int(cur.rowcount)

    def get_preferences(self, user_id: int) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT preferences FROM notification_preferences WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _as_text(row["preferences"]) if row else None

    def get_preferences_many(self, user_ids: Sequence[int]) -> Mapping[int, str]:
        ids = [int(i) for i in user_ids]
        if not ids:
            return {}
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT user_id, preferences FROM notification_preferences WHERE user_id IN ({in_clause(ids)})",
                tuple(ids),
            )
            return {int(r["user_id"]): _as_text(r["preferences"]) for r in fetchall(cur)}

    def save_preferences(self, user_id: int, document: str) -> None:
        with db_cursor(self._conn_factory, write=True) as (_, cur):
            cur.execute(
                """
                INSERT INTO notification_preferences(user_id, preferences) VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE preferences=VALUES(preferences)
                """,
                (user_id, document),
            )


def _as_text(value) -> str:
    # JSON columns may arrive as bytes with the pure-Python connector
    return value.decode("utf-8") if isinstance(value, (bytes, bytearray)) else str(value)
