from __future__ import annotations

from flask import Flask, jsonify, request, session
from PIL import Image
from pyzbar.pyzbar import decode as pyzbar_decode

from ..common.web import json_error, role_required
from ..container import Container
from ..core.app_logger import get_logger
from ..core.enums import Role
from ..core.exceptions import ValidationError

logger = get_logger("web.scans")


def register(app: Flask, container: Container) -> None:
    def _verify(raw_code):
        try:
            result = container.scan_service.verify_scan(raw_code)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Verification failed")
            return json_error("System error while verifying the code", 500)
        return jsonify({"success": True, **result.to_dict()}), 200

    @app.route("/api/verify", methods=["POST"], endpoint="api_verify")
    @role_required(Role.SECURITY)
    def api_verify():
        """Look up a scanned code and propose Entry/Exit. Writes nothing."""
        data = request.get_json(silent=True) or {}
        code = data.get("code")
        if not isinstance(code, str) or not code.strip():
            return json_error("Invalid code", 400)
        return _verify(code)

    @app.route("/api/verify/image", methods=["POST"], endpoint="api_verify_image")
    @role_required(Role.SECURITY)
    def api_verify_image():
        """Decode the QR code in an uploaded photo, then verify it like /api/verify."""
        file = request.files.get("image")
        if file is None:
            return json_error("Missing image file", 400)

        try:
            img = Image.open(file.stream).convert("RGB")
            decoded = pyzbar_decode(img)
        except Exception:
            logger.warning("Unreadable scan image", exc_info=True)
            return json_error("Unreadable image", 400)

        if not decoded:
            return json_error("No QR code found in image", 400)

        try:
            raw_code = decoded[0].data.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("QR payload is not UTF-8: %r", decoded[0].data)
            return json_error("Unreadable QR code", 400)

        return _verify(raw_code)

    @app.route("/api/authorize", methods=["POST"], endpoint="api_authorize")
    @role_required(Role.SECURITY)
    def api_authorize():
        """Record the operator's grant/deny decision. Call once per scan."""
        data = request.get_json(silent=True) or {}
        code = data.get("code")
        decision = data.get("authorized")
        if not isinstance(code, str) or not code.strip() or not isinstance(decision, bool):
            return json_error("Invalid request", 400)

        try:
            result = container.scan_service.authorize_scan(code, decision, scanned_by=int(session["user_id"]))
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Authorization failed for %r", code)
            return json_error("System error while recording the decision", 500)

        return jsonify({"success": True, **result.to_dict()}), 200
