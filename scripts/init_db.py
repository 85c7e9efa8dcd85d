from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.access_control.access_control.container import build_container
from src.access_control.access_control.core.app_logger import setup_logging
from src.access_control.access_control.database.bootstrap import apply_schema, list_tables
from src.access_control.access_control.main import default_accounts


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logger = setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(db_config=dict(settings.DB_CONFIG))

    apply_schema(container.conn, schema_path=REPO_ROOT / "database" / "schema.sql")
    created = container.user_service.ensure_default_users(default_accounts(settings))

    cfg = container.conn.config
    logger.info(
        "OK: %s@%s:%s/%s ready (tables=%d, default users created=%d)",
        cfg.user,
        cfg.host,
        cfg.port,
        cfg.database,
        len(list_tables(container.conn)),
        created,
    )


if __name__ == "__main__":
    main()
