from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from ..core.logger import get_logger
from .connection import DatabaseConnection, DBConfig

log = get_logger(__name__)

DEMO_USERS = (
    ("Ada", "Admin", "admin@nursery.local", "admin123", Role.ADMIN),
    ("Emma", "Carer", "employee@nursery.local", "employee123", Role.EMPLOYEE),
    ("Paul", "Parent", "parent@nursery.local", "parent123", Role.PARENT),
)


def _strip_create_db_and_use(sql: str) -> str:
    # schema.sql must work whatever the configured database is called.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a script on ';' outside of quoted strings; drops '--' comment lines."""
    lines = [ln for ln in sql.splitlines() if not ln.lstrip().startswith("--")]
    buf: list[str] = []
    quote = None
    escape = False

    for ch in "\n".join(lines):
        if escape:
            escape = False
        elif ch == "\\":
            escape = True
        elif quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _connection(db_config: dict) -> DatabaseConnection:
    return DatabaseConnection(DBConfig.from_dict(db_config))


def ensure_database_exists(db_config: dict) -> None:
    factory = _connection(db_config)
    conn = factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_sql_file(db_config: dict, *, path: str | Path) -> int:
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = _connection(db_config).connect()
    count = 0
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()
    return count


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    count = apply_sql_file(db_config, path=schema_path)
    log.info("Applied %s (%d statements)", Path(schema_path).name, count)


def ensure_demo_users(db_config: dict) -> None:
    """Create or reset one demo account per role."""
    conn = _connection(db_config).connect()
    try:
        cur = conn.cursor(dictionary=True)
        for first_name, last_name, email, password, role in DEMO_USERS:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT user_id FROM users WHERE email=%s", (email,))
            if cur.fetchone():
                cur.execute(
                    """
                    UPDATE users
                    SET first_name=%s, last_name=%s, password_hash=%s, role=%s, is_active=1
                    WHERE email=%s
                    """,
                    (first_name, last_name, password_hash, role.value, email),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO users (first_name, last_name, email, password_hash, role)
                    VALUES (%s, %s, %s, %s, %s)
                    """,
                    (first_name, last_name, email, password_hash, role.value),
                )
        conn.commit()
    finally:
        conn.close()
    log.info("Demo users ready (%d accounts)", len(DEMO_USERS))


def list_tables(db_config: dict) -> list[str]:
    conn = _connection(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
