from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterable

from ..common.datetime_utils import now_utc
from ..core.app_logger import get_logger
from ..core.constants import MISSING_PERSON_NAME
from ..core.exceptions import ValidationError
from .model import RosterRow, UploadSummary
from .normalize import is_valid_code, normalize_code
from .repository import AccessCodeRepository

logger = get_logger("codes")


class CodeRegistryService:
    """Use case: maintain the code registry (authorizer uploads)."""

    def __init__(self, codes: AccessCodeRepository, *, clock: Callable[[], datetime] = now_utc):
        self._codes = codes
        self._clock = clock

    def clear_access_codes(self) -> None:
        """Intentionally a no-op.

        Uploads never delete: the latest upload wins on lookup and older rows stay for audit.
        """

        logger.debug("clear_access_codes: registry history retained")

    def upload_roster(self, rows: Iterable[RosterRow], *, uploaded_by: int) -> UploadSummary:
        self.clear_access_codes()

        stored = 0
        skipped = 0
        for row in rows:
            try:
                code, person_name = self._validate_row(row)
            except ValidationError as e:
                skipped += 1
                logger.debug("Skipping roster row %r: %s", row, e)
                continue

            self._codes.create(
                code=code,
                person_name=person_name,
                uploaded_by=int(uploaded_by),
                uploaded_at=self._clock(),
            )
            stored += 1

        logger.info("Roster upload by user %s: stored=%d skipped=%d", uploaded_by, stored, skipped)
        return UploadSummary(stored=stored, skipped=skipped)

    def _validate_row(self, row: RosterRow) -> tuple[str, str]:
        code = normalize_code(row.code)
        if not code:
            raise ValidationError("Missing code")
        if not is_valid_code(code):
            raise ValidationError(f"Invalid code length: {len(code)}")

        person_name = "" if row.person_name is None else str(row.person_name).strip()
        return code, person_name or MISSING_PERSON_NAME
