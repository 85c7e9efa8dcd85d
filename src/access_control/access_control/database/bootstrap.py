from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from ..core.app_logger import get_logger
from .connection import DatabaseConnection

logger = get_logger("database")

_CREATE_DB_OR_USE = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b.*?;\s*$")
_LINE_COMMENT = re.compile(r"(?m)^\s*--.*$")


def iter_schema_statements(sql: str) -> Iterable[str]:
    """Split schema.sql into statements.

    The schema is ours and keeps ';' out of string literals, so a plain split is enough.
    CREATE DATABASE / USE lines are dropped so the file works for any database name.
    """
    sql = _CREATE_DB_OR_USE.sub("", sql)
    sql = _LINE_COMMENT.sub("", sql)
    for chunk in sql.split(";"):
        stmt = chunk.strip()
        if stmt:
            yield stmt


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    name = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_database_exists(conn_factory)
    sql = Path(schema_path).read_text(encoding="utf-8")

    with conn_factory.cursor(dictionary=False) as cur:
        for stmt in iter_schema_statements(sql):
            cur.execute(stmt)
    logger.info("Schema applied from %s", schema_path)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with conn_factory.cursor(dictionary=False) as cur:
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
