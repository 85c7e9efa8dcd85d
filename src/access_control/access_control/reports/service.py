from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from ..codes.repository import AccessCodeRepository
from ..common.datetime_utils import in_zone
from ..core.app_logger import get_logger
from ..core.constants import (
    DEFAULT_REPORT_TIMEZONE,
    MISSING_PERSON_NAME,
    REPORT_DATE_FORMAT,
    REPORT_TIME_FORMAT,
)
from ..core.enums import Direction
from ..scans.direction import infer_direction
from ..scans.model import ScanLogEntry
from ..scans.repository import ScanLogRepository

logger = get_logger("reports")


@dataclass(frozen=True)
class ScanReportRow:
    """Read-model for the controller's download. No ids or raw timestamps."""

    code: str
    person_name: str
    date: str
    time: str
    direction: Direction


class ScanReportService:
    def __init__(
        self,
        scans: ScanLogRepository,
        codes: AccessCodeRepository,
        *,
        timezone_name: str = DEFAULT_REPORT_TIMEZONE,
    ):
        self._scans = scans
        self._codes = codes
        self._tz = timezone_name

    def export_scan_report(self) -> List[ScanReportRow]:
        """Authorized scans, most recent first, each labeled Entry/Exit.

        Labels come from the position of the scan among the code's authorized scans
        in ascending time order. Denied scans are dropped before counting, so this can
        disagree with the label the security desk saw live.
        """

        by_code: Dict[str, List[ScanLogEntry]] = {}
        for entry in self._scans.list_all():
            if entry.authorized:
                by_code.setdefault(entry.code, []).append(entry)

        labeled: list[tuple[ScanLogEntry, Direction]] = []
        for entries in by_code.values():
            entries.sort(key=lambda e: e.scanned_at)
            for index, entry in enumerate(entries):
                labeled.append((entry, infer_direction(index)))

        labeled.sort(key=lambda item: item[0].scanned_at, reverse=True)

        # resolved against today's registry, so re-uploads rename old rows too
        names: Dict[str, str] = {}
        rows: List[ScanReportRow] = []
        for entry, direction in labeled:
            if entry.code not in names:
                names[entry.code] = self._person_name(entry.code)
            local = in_zone(entry.scanned_at, self._tz)
            rows.append(
                ScanReportRow(
                    code=entry.code,
                    person_name=names[entry.code],
                    date=local.strftime(REPORT_DATE_FORMAT),
                    time=local.strftime(REPORT_TIME_FORMAT),
                    direction=direction,
                )
            )

        logger.info("Scan report compiled: %d rows over %d codes", len(rows), len(by_code))
        return rows

    def _person_name(self, code: str) -> str:
        holder = self._codes.get_current(code)
        return holder.person_name if holder else MISSING_PERSON_NAME
