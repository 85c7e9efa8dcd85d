from __future__ import annotations

import pytest
from flask import Flask

from src.access_control.access_control.common.web import HOME_TEMPLATES, home_template_for, role_required
from src.access_control.access_control.core.enums import Role


def test_every_role_has_exactly_one_home_page():
    assert set(HOME_TEMPLATES) == set(Role)
    assert len(set(HOME_TEMPLATES.values())) == len(Role)
    assert home_template_for(None) is None


@pytest.fixture
def client():
    app = Flask(__name__)
    app.secret_key = "test"

    @app.route("/guarded")
    @role_required(Role.SECURITY)
    def guarded():
        return {"success": True}

    return app.test_client()


def _login(client, role: str):
    with client.session_transaction() as sess:
        sess["user_id"] = 1
        sess["role"] = role


def test_anonymous_request_is_forbidden(client):
    res = client.get("/guarded")

    assert res.status_code == 403
    assert res.get_json() == {"success": False, "message": "Forbidden"}


def test_wrong_role_is_forbidden(client):
    _login(client, Role.CONTROLLER.value)

    assert client.get("/guarded").status_code == 403


def test_unknown_role_is_forbidden(client):
    _login(client, "admin")

    assert client.get("/guarded").status_code == 403


def test_matching_role_passes(client):
    _login(client, Role.SECURITY.value)

    res = client.get("/guarded")
    assert res.status_code == 200
    assert res.get_json() == {"success": True}
