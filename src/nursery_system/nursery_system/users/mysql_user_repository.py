from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_USER_COLUMNS = "user_id, first_name, last_name, email, password_hash, role, phone, is_active, last_login"


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        phone=row.get("phone"),
        is_active=bool(row.get("is_active", True)),
        last_login=row.get("last_login"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE email=%s", (email.lower(),))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str,
        role: Role,
        phone: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory, write=True) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(first_name, last_name, email, password_hash, role, phone, is_active)
                VALUES(%s,%s,%s,%s,%s,%s,1)
                """,
                (first_name, last_name, email.lower(), password_hash, role.value, phone),
            )
            return int(cur.lastrowid)

    def list_active_ids_by_role(self, role: Role) -> Sequence[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT user_id FROM users WHERE role=%s AND is_active=1 ORDER BY user_id",
                (role.value,),
            )
            return [int(r["user_id"]) for r in fetchall(cur)]

    def touch_last_login(self, user_id: int) -> None:
        with db_cursor(self._conn_factory, write=True) as (_, cur):
            cur.execute("UPDATE users SET last_login=NOW() WHERE user_id=%s", (user_id,))
