from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .access.controller import register as register_access
from .billing.controller import register as register_billing
from .container import build_container
from .core.exceptions import NurseryError
from .core.logger import configure_logging
from .database.bootstrap import apply_schema, ensure_demo_users, list_tables
from .notifications.controller import register as register_notifications
from .users.controller import register as register_users

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    log = configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    log.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        log.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        ensure_demo_users(db_config)

    container = build_container(
        db_config=db_config,
        billing=getattr(settings, "BILLING", None),
        retention_days=int(getattr(settings, "NOTIFICATION_RETENTION_DAYS", 30)),
    )

    @app.errorhandler(NurseryError)
    def handle_nursery_error(e: NurseryError):
        log.warning("%s: %s", type(e).__name__, e)
        return jsonify({"error": str(e)}), e.status_code

    register_access(app)
    register_users(app, container)
    register_notifications(app, container)
    register_billing(app, container)

    return app
