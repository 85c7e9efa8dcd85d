from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .codes.controller import register as register_codes
from .common.web import register_error_handlers
from .container import build_container
from .core.app_logger import setup_logging
from .core.constants import DEFAULT_REPORT_TIMEZONE
from .core.enums import Role
from .database.bootstrap import apply_schema, list_tables
from .reports.controller import register as register_reports
from .scans.controller import register as register_scans
from .users.controller import register as register_users
from .users.model import DefaultAccount


def default_accounts(settings) -> list[DefaultAccount]:
    return [
        DefaultAccount(username=str(a["username"]), password=str(a["password"]), role=Role(a["role"]))
        for a in getattr(settings, "DEFAULT_USERS", [])
    ]


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = getattr(settings, "MAX_CONTENT_LENGTH", None)
    db_config = getattr(settings, "DB_CONFIG")

    logger = setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    container = build_container(
        db_config=db_config,
        report_timezone=getattr(settings, "REPORT_TIMEZONE", DEFAULT_REPORT_TIMEZONE),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(container.conn, schema_path=schema_path)
        logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))
    if bool(getattr(settings, "AUTO_BOOTSTRAP_USERS", False)):
        container.user_service.ensure_default_users(default_accounts(settings))

    register_error_handlers(app)
    register_users(app, container)
    register_codes(app, container)
    register_scans(app, container)
    register_reports(app, container)

    return app
