from __future__ import annotations

from typing import BinaryIO, List

from openpyxl import load_workbook

from ..core.exceptions import RosterFormatError
from .model import RosterRow

CODE_COLUMN = 0
NAME_COLUMN = 2


def read_roster_xlsx(stream: BinaryIO) -> List[RosterRow]:
    """Read the first worksheet of an uploaded roster.

    Column A holds the code and column C the person's name; column B is ignored.
    Header rows are not special-cased, they fail code validation downstream.
    """

    try:
        workbook = load_workbook(stream, read_only=True, data_only=True)
    except Exception as e:
        raise RosterFormatError("Invalid Excel file") from e

    try:
        sheet = workbook.worksheets[0]
        rows: List[RosterRow] = []
        for values in sheet.iter_rows(values_only=True):
            if not values:
                continue
            code = values[CODE_COLUMN] if len(values) > CODE_COLUMN else None
            name = values[NAME_COLUMN] if len(values) > NAME_COLUMN else None
            rows.append(RosterRow(code=code, person_name=name))
        return rows
    finally:
        workbook.close()
