from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file, session

from ..common.web import json_error, role_required
from ..container import Container
from ..core.app_logger import get_logger
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .normalize import is_valid_code, normalize_code
from .qr import make_code_qr_png
from .roster import read_roster_xlsx

logger = get_logger("web.codes")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/upload", methods=["POST"], endpoint="api_upload_roster")
    @role_required(Role.AUTHORIZER)
    def api_upload_roster():
        """Authorizer uploads an .xlsx roster: column A code, column C person name."""
        file = request.files.get("file")
        if file is None or not file.filename:
            return json_error("No file uploaded", 400)

        try:
            rows = read_roster_xlsx(file.stream)
            summary = container.code_registry_service.upload_roster(rows, uploaded_by=int(session["user_id"]))
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Roster upload failed")
            return json_error("System error while processing the roster", 500)

        return jsonify({"success": True, "stored": summary.stored, "skipped": summary.skipped}), 200

    @app.route("/api/codes/<code>/qr.png", endpoint="api_code_qr")
    @role_required(Role.AUTHORIZER)
    def api_code_qr(code: str):
        """Printable badge QR for a code."""
        code = normalize_code(code)
        if not is_valid_code(code):
            return json_error("Invalid code", 400)

        png = make_code_qr_png(code)
        return send_file(io.BytesIO(png), mimetype="image/png", download_name=f"{code}.png")
