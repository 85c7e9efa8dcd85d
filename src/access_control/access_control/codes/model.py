from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AccessCode:
    """Domain entity: one code-to-person binding from a roster upload.

    Rows are never updated; the newest row for a code is its current holder.
    """

    access_code_id: int
    code: str
    person_name: str
    uploaded_by: int
    uploaded_at: datetime


@dataclass(frozen=True)
class RosterRow:
    """One raw row of an uploaded roster, before normalization."""

    code: Optional[object]
    person_name: Optional[object] = None


@dataclass(frozen=True)
class UploadSummary:
    stored: int
    skipped: int
