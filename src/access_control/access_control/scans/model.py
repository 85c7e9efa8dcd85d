from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import Direction


@dataclass(frozen=True)
class ScanLogEntry:
    """Domain entity: one human decision on one scan. Written once, never changed."""

    scan_log_id: int
    code: str
    scanned_by: int
    scanned_at: datetime
    authorized: bool


@dataclass(frozen=True)
class ScanVerification:
    """Pending decision returned by verify; nothing is persisted for it."""

    authorized: bool
    direction: Direction
    code: str
    person_name: str

    def to_dict(self) -> dict:
        return {
            "authorized": self.authorized,
            "direction": self.direction.value,
            "code": self.code,
            "person_name": self.person_name,
        }


@dataclass(frozen=True)
class ScanAuthorization:
    """Resolved decision returned by authorize, after the ledger row is written."""

    authorized: bool
    direction: Direction
    person_name: str

    def to_dict(self) -> dict:
        return {
            "authorized": self.authorized,
            "direction": self.direction.value,
            "person_name": self.person_name,
        }
