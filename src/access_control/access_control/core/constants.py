"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

CODE_LENGTH = 8

# Shown by verify/authorize when the code has no current holder.
UNKNOWN_PERSON = "Unknown Person"
# Stored for roster rows without a name, and shown in reports for codes without a holder.
MISSING_PERSON_NAME = "N/A"

DEFAULT_REPORT_TIMEZONE = "America/Toronto"
REPORT_DATE_FORMAT = "%d/%m/%Y"
REPORT_TIME_FORMAT = "%H:%M:%S"

REPORT_SHEET_NAME = "Scan Logs"
REPORT_FILENAME = "scan_logs.xlsx"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
