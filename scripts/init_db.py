from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.nursery_system.nursery_system.core.logger import configure_logging
from src.nursery_system.nursery_system.database.bootstrap import apply_schema, ensure_demo_users, list_tables


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    log = configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    if "--seed" in sys.argv[1:]:
        ensure_demo_users(db_config)

    log.info(
        "OK: schema applied to %s@%s:%s/%s (tables=%d)",
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        len(list_tables(db_config)),
    )


if __name__ == "__main__":
    main()
