from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.app_logger import get_logger
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .model import DefaultAccount
from .repository import UserRepository

logger = get_logger("users")


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    username: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username((username or "").strip())
        if not user or not user.is_active:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except Exception:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid username or password")

        return SessionUser(user_id=user.user_id, username=user.username, role=user.role)


class UserService:
    """Use case: manage operator accounts."""

    def __init__(self, users: UserRepository):
        self._users = users

    def ensure_default_users(self, accounts: Iterable[DefaultAccount]) -> int:
        """Create each missing default account; existing ones are left untouched.

        Safe to run on every start. Returns how many accounts were created.
        """

        created = 0
        for account in accounts:
            username = require_non_empty(account.username, "username")
            if self._users.get_by_username(username):
                continue
            if not account.password:
                logger.warning("No password configured for default account %r, not created", username)
                continue
            self._users.create_user(
                username=username,
                password_hash=generate_password_hash(account.password),
                role=Role(account.role),
            )
            created += 1
            logger.info("Created default %s account %r", Role(account.role).value, username)
        return created
