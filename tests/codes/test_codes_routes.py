from __future__ import annotations

import io

from openpyxl import Workbook

from src.access_control.access_control.core.enums import Role


def _roster(rows) -> io.BytesIO:
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    out = io.BytesIO()
    wb.save(out)
    out.seek(0)
    return out


def _upload(client, stream, filename="roster.xlsx"):
    return client.post("/api/upload", data={"file": (stream, filename)}, content_type="multipart/form-data")


def test_upload_stores_roster_and_reports_summary(client, login, codes_repo):
    login(client, Role.AUTHORIZER, user_id=5)

    res = _upload(
        client,
        _roster(
            [
                ["Code", "Badge", "Name"],
                ["abcd1234", "x", "Mario Rossi"],
                ["EFGH5678", None, None],
            ]
        ),
    )

    assert res.status_code == 200
    assert res.get_json() == {"success": True, "stored": 2, "skipped": 1}
    assert [(r.code, r.person_name, r.uploaded_by) for r in codes_repo.rows] == [
        ("ABCD1234", "Mario Rossi", 5),
        ("EFGH5678", "N/A", 5),
    ]


def test_upload_without_file_is_rejected(client, login):
    login(client, Role.AUTHORIZER)

    res = client.post("/api/upload", data={}, content_type="multipart/form-data")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_upload_of_non_workbook_is_a_json_400(client, login, codes_repo):
    login(client, Role.AUTHORIZER)

    res = _upload(client, io.BytesIO(b"not a workbook"), filename="roster.csv")

    assert res.status_code == 400
    assert res.get_json()["success"] is False
    assert codes_repo.rows == []


def test_oversized_upload_gets_json_413(web_app, client, login):
    web_app.config["MAX_CONTENT_LENGTH"] = 64
    login(client, Role.AUTHORIZER)

    res = _upload(client, io.BytesIO(b"x" * 1024))

    assert res.status_code == 413
    assert res.get_json() == {"success": False, "message": "Uploaded file is too large"}


def test_security_cannot_upload(client, login, codes_repo):
    login(client, Role.SECURITY)

    res = _upload(client, _roster([["ABCD1234", None, "A"]]))

    assert res.status_code == 403
    assert codes_repo.rows == []


def test_badge_qr_is_a_png(client, login):
    login(client, Role.AUTHORIZER)

    res = client.get("/api/codes/abcd1234/qr.png")

    assert res.status_code == 200
    assert res.mimetype == "image/png"
    assert res.data.startswith(b"\x89PNG")


def test_badge_qr_for_invalid_code_is_rejected(client, login):
    login(client, Role.AUTHORIZER)

    assert client.get("/api/codes/SHORT/qr.png").status_code == 400
