from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection, fetchone
from .model import User
from .repository import UserRepository


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        username=row["username"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                "SELECT user_id, username, password_hash, role, is_active FROM users WHERE user_id=%s",
                (int(user_id),),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                "SELECT user_id, username, password_hash, role, is_active FROM users WHERE username=%s",
                (username,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(self, *, username: str, password_hash: str, role: Role) -> int:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                """
                INSERT INTO users(username, password_hash, role, is_active)
                VALUES(%s,%s,%s,1)
                """,
                (username, password_hash, role.value),
            )
            return int(cur.lastrowid)
