from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .model import AccessCode


class AccessCodeRepository(Protocol):
    """Repository interface for the code registry.

    Note (DIP): services depend on this interface, not on a concrete database.
    Callers always pass codes already normalized.
    """

    def get_current(self, code: str) -> Optional[AccessCode]:
        """Latest-uploaded row for the code, or None."""

        raise NotImplementedError

    def create(self, *, code: str, person_name: str, uploaded_by: int, uploaded_at: datetime) -> int:
        raise NotImplementedError
