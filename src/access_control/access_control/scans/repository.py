from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import ScanLogEntry


class ScanLogRepository(Protocol):
    """Append-only scan ledger. Codes are passed already normalized."""

    def count_for_code(self, code: str) -> int:
        """Number of ledger rows for the code, authorized or not."""

        raise NotImplementedError

    def append(self, *, code: str, scanned_by: int, scanned_at: datetime, authorized: bool) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[ScanLogEntry]:
        """Every ledger row in insertion order."""

        raise NotImplementedError
