from __future__ import annotations

from datetime import datetime
from typing import Callable

from ..codes.normalize import normalize_code
from ..codes.repository import AccessCodeRepository
from ..common.datetime_utils import now_utc
from ..common.validators import require_bool
from ..core.app_logger import get_logger
from ..core.constants import UNKNOWN_PERSON
from ..core.enums import Direction
from ..core.exceptions import ValidationError
from .direction import infer_direction
from .model import ScanAuthorization, ScanVerification
from .repository import ScanLogRepository

logger = get_logger("scans")


class ScanService:
    """Use case: two-phase scan handling for the security desk.

    1. `verify_scan` looks the code up and proposes a direction. Read-only.
    2. The operator grants or denies; `authorize_scan` records that decision as
       exactly one ledger row.

    Both phases recompute the direction from the ledger count at call time. Two
    operators scanning the same code before either authorizes will both see the
    same direction; no per-code lock is taken.
    """

    def __init__(
        self,
        scans: ScanLogRepository,
        codes: AccessCodeRepository,
        *,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._scans = scans
        self._codes = codes
        self._clock = clock

    def _require_code(self, raw_code) -> str:
        code = normalize_code(raw_code)
        if not code:
            raise ValidationError("Invalid code")
        return code

    def _live_direction(self, code: str) -> Direction:
        # every prior decision counts here, denied ones included
        return infer_direction(self._scans.count_for_code(code))

    def verify_scan(self, raw_code) -> ScanVerification:
        code = self._require_code(raw_code)
        holder = self._codes.get_current(code)
        direction = self._live_direction(code)

        result = ScanVerification(
            authorized=holder is not None,
            direction=direction,
            code=code,
            person_name=holder.person_name if holder else UNKNOWN_PERSON,
        )
        logger.info("Verified %s: known=%s direction=%s", code, result.authorized, direction.value)
        return result

    def authorize_scan(self, code, decision, *, scanned_by: int) -> ScanAuthorization:
        code = self._require_code(code)
        decision = require_bool(decision, "authorization decision")

        direction = self._live_direction(code)
        holder = self._codes.get_current(code)
        person_name = holder.person_name if holder else UNKNOWN_PERSON

        self._scans.append(
            code=code,
            scanned_by=int(scanned_by),
            scanned_at=self._clock(),
            authorized=decision,
        )
        logger.info(
            "Scan %s %s by user %s (%s)",
            code,
            "granted" if decision else "denied",
            scanned_by,
            direction.value,
        )
        return ScanAuthorization(authorized=decision, direction=direction, person_name=person_name)
