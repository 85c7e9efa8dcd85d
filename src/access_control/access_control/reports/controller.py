from __future__ import annotations

from flask import Flask, send_file

from ..common.web import json_error, role_required
from ..container import Container
from ..core.app_logger import get_logger
from ..core.constants import REPORT_FILENAME, XLSX_MIMETYPE
from ..core.enums import Role
from .export import write_scan_report_xlsx

logger = get_logger("web.reports")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/scanlogs/download", endpoint="api_scanlogs_download")
    @role_required(Role.CONTROLLER)
    def api_scanlogs_download():
        try:
            rows = container.scan_report_service.export_scan_report()
            out = write_scan_report_xlsx(rows)
        except Exception:
            logger.exception("Scan report export failed")
            return json_error("System error while exporting scan logs", 500)

        return send_file(out, mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=REPORT_FILENAME)
