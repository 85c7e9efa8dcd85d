from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Optional

import pytest
from flask import Flask

from src.access_control.access_control.codes.model import AccessCode
from src.access_control.access_control.codes.service import CodeRegistryService
from src.access_control.access_control.common.web import register_error_handlers
from src.access_control.access_control.core.enums import Role
from src.access_control.access_control.reports.service import ScanReportService
from src.access_control.access_control.scans.model import ScanLogEntry
from src.access_control.access_control.scans.service import ScanService
from src.access_control.access_control.users.model import User


class InMemoryAccessCodes:
    def __init__(self):
        self.rows: list[AccessCode] = []

    def get_current(self, code: str) -> Optional[AccessCode]:
        matches = [r for r in self.rows if r.code == code]
        if not matches:
            return None
        return max(matches, key=lambda r: (r.uploaded_at, r.access_code_id))

    def create(self, *, code: str, person_name: str, uploaded_by: int, uploaded_at: datetime) -> int:
        rid = len(self.rows) + 1
        self.rows.append(
            AccessCode(
                access_code_id=rid,
                code=code,
                person_name=person_name,
                uploaded_by=uploaded_by,
                uploaded_at=uploaded_at,
            )
        )
        return rid


class InMemoryScanLogs:
    def __init__(self):
        self.rows: list[ScanLogEntry] = []

    def count_for_code(self, code: str) -> int:
        return sum(1 for r in self.rows if r.code == code)

    def append(self, *, code: str, scanned_by: int, scanned_at: datetime, authorized: bool) -> int:
        rid = len(self.rows) + 1
        self.rows.append(
            ScanLogEntry(
                scan_log_id=rid,
                code=code,
                scanned_by=scanned_by,
                scanned_at=scanned_at,
                authorized=authorized,
            )
        )
        return rid

    def list_all(self):
        return list(self.rows)


class InMemoryUsers:
    def __init__(self):
        self.users: dict[int, User] = {}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        for u in self.users.values():
            if u.username == username:
                return u
        return None

    def create_user(self, *, username: str, password_hash: str, role: Role) -> int:
        uid = len(self.users) + 1
        self.users[uid] = User(user_id=uid, username=username, password_hash=password_hash, role=role)
        return uid


class StepClock:
    """Returns start, start+step, start+2*step, ... on successive calls."""

    def __init__(self, start: datetime, step: timedelta = timedelta(minutes=1)):
        self._next = start
        self._step = step

    def __call__(self) -> datetime:
        now = self._next
        self._next = now + self._step
        return now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 7, 1, 16, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(fixed_now) -> StepClock:
    return StepClock(fixed_now)


@pytest.fixture
def codes_repo() -> InMemoryAccessCodes:
    return InMemoryAccessCodes()


@pytest.fixture
def scans_repo() -> InMemoryScanLogs:
    return InMemoryScanLogs()


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def web_container(codes_repo, scans_repo, clock):
    return SimpleNamespace(
        code_registry_service=CodeRegistryService(codes_repo, clock=clock),
        scan_service=ScanService(scans_repo, codes_repo, clock=clock),
        scan_report_service=ScanReportService(scans_repo, codes_repo, timezone_name="America/Toronto"),
    )


@pytest.fixture
def web_app(web_container) -> Flask:
    # controllers pull in pyzbar, which needs the native zbar library
    from src.access_control.access_control.codes.controller import register as register_codes
    from src.access_control.access_control.reports.controller import register as register_reports
    from src.access_control.access_control.scans.controller import register as register_scans

    app = Flask(__name__)
    app.secret_key = "test"
    app.config["TESTING"] = True
    register_error_handlers(app)
    register_codes(app, web_container)
    register_scans(app, web_container)
    register_reports(app, web_container)
    return app


@pytest.fixture
def client(web_app):
    return web_app.test_client()


@pytest.fixture
def login():
    def _login(client, role: Role, user_id: int = 1) -> None:
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
            sess["role"] = role.value

    return _login
