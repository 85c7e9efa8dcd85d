from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from ..core.constants import REPORT_SHEET_NAME
from .service import ScanReportRow

REPORT_COLUMNS = ["QR Code", "Person Name", "Date", "Time", "Type"]


def report_frame(rows: Sequence[ScanReportRow]) -> pd.DataFrame:
    return pd.DataFrame(
        [[r.code, r.person_name, r.date, r.time, r.direction.value] for r in rows],
        columns=REPORT_COLUMNS,
    )


def write_scan_report_xlsx(rows: Sequence[ScanReportRow]) -> io.BytesIO:
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        report_frame(rows).to_excel(writer, index=False, sheet_name=REPORT_SHEET_NAME)
    out.seek(0)
    return out
