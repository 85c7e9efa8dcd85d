from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import as_utc, to_db_utc
from ..database.connection import DatabaseConnection, fetchone
from .model import AccessCode
from .repository import AccessCodeRepository


class MySQLAccessCodeRepository(AccessCodeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_current(self, code: str) -> Optional[AccessCode]:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                """
                SELECT access_code_id, code, person_name, uploaded_by, uploaded_at
                FROM access_codes
                WHERE code=%s
                ORDER BY uploaded_at DESC, access_code_id DESC
                LIMIT 1
                """,
                (code,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AccessCode(
                access_code_id=int(r["access_code_id"]),
                code=r["code"],
                person_name=r["person_name"],
                uploaded_by=int(r["uploaded_by"]),
                uploaded_at=as_utc(r["uploaded_at"]),
            )

    def create(self, *, code: str, person_name: str, uploaded_by: int, uploaded_at: datetime) -> int:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                """
                INSERT INTO access_codes(code, person_name, uploaded_by, uploaded_at)
                VALUES(%s,%s,%s,%s)
                """,
                (code, person_name, int(uploaded_by), to_db_utc(uploaded_at)),
            )
            return int(cur.lastrowid)
