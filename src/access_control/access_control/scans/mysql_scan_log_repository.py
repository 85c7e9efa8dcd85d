from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import as_utc, to_db_utc
from ..database.connection import DatabaseConnection, fetchall, fetchone
from .model import ScanLogEntry
from .repository import ScanLogRepository


class MySQLScanLogRepository(ScanLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def count_for_code(self, code: str) -> int:
        with self._conn_factory.cursor() as cur:
            cur.execute("SELECT COUNT(*) AS n FROM scan_logs WHERE code=%s", (code,))
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def append(self, *, code: str, scanned_by: int, scanned_at: datetime, authorized: bool) -> int:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                """
                INSERT INTO scan_logs(code, scanned_by, scanned_at, authorized)
                VALUES(%s,%s,%s,%s)
                """,
                (code, int(scanned_by), to_db_utc(scanned_at), 1 if authorized else 0),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[ScanLogEntry]:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                """
                SELECT scan_log_id, code, scanned_by, scanned_at, authorized
                FROM scan_logs
                ORDER BY scan_log_id ASC
                """
            )
            rows = fetchall(cur)
            return [
                ScanLogEntry(
                    scan_log_id=int(r["scan_log_id"]),
                    code=r["code"],
                    scanned_by=int(r["scanned_by"]),
                    scanned_at=as_utc(r["scanned_at"]),
                    authorized=bool(r["authorized"]),
                )
                for r in rows
            ]
