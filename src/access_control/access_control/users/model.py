from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an operator account.

    Note: plain data object, no database access here.
    """

    user_id: int
    username: str
    password_hash: str
    role: Role
    is_active: bool = True


@dataclass(frozen=True)
class DefaultAccount:
    """Account created at startup when missing."""

    username: str
    password: str
    role: Role
