from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.nursery_system.nursery_system.container import build_container
from src.nursery_system.nursery_system.core.logger import configure_logging


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        db_config=settings.DB_CONFIG,
        retention_days=int(getattr(settings, "NOTIFICATION_RETENTION_DAYS", 30)),
    )
    container.notification_service.cleanup_old()


if __name__ == "__main__":
    main()
