from __future__ import annotations

from datetime import timedelta

from src.access_control.access_control.codes.model import RosterRow
from src.access_control.access_control.codes.service import CodeRegistryService


def test_upload_stores_valid_rows_and_skips_bad_lengths(codes_repo, clock):
    svc = CodeRegistryService(codes_repo, clock=clock)

    summary = svc.upload_roster(
        [
            RosterRow(code=" abcd1234 ", person_name=" Mario Rossi "),
            RosterRow(code="SHORT", person_name="Too Short"),
            RosterRow(code="TOOLONG123", person_name="Too Long"),
            RosterRow(code="efgh5678", person_name="Anna Bianchi"),
        ],
        uploaded_by=7,
    )

    assert summary.stored == 2
    assert summary.skipped == 2
    assert [(r.code, r.person_name, r.uploaded_by) for r in codes_repo.rows] == [
        ("ABCD1234", "Mario Rossi", 7),
        ("EFGH5678", "Anna Bianchi", 7),
    ]


def test_upload_skips_missing_code_and_defaults_missing_name(codes_repo, clock):
    svc = CodeRegistryService(codes_repo, clock=clock)

    summary = svc.upload_roster(
        [RosterRow(code=None, person_name="Nobody"), RosterRow(code="ABCD1234", person_name="  ")],
        uploaded_by=1,
    )

    assert summary.stored == 1
    assert summary.skipped == 1
    assert codes_repo.rows[0].person_name == "N/A"


def test_reupload_keeps_history_and_latest_upload_wins(codes_repo, clock):
    svc = CodeRegistryService(codes_repo, clock=clock)

    svc.upload_roster([RosterRow(code="ABCD1234", person_name="Old Holder")], uploaded_by=1)
    svc.upload_roster([RosterRow(code="abcd1234", person_name="New Holder")], uploaded_by=1)

    assert len(codes_repo.rows) == 2
    assert codes_repo.get_current("ABCD1234").person_name == "New Holder"


def test_latest_wins_by_upload_time_not_insertion_order(codes_repo, fixed_now):
    codes_repo.create(code="ABCD1234", person_name="Later", uploaded_by=1, uploaded_at=fixed_now)
    codes_repo.create(
        code="ABCD1234", person_name="Earlier", uploaded_by=1, uploaded_at=fixed_now - timedelta(days=1)
    )

    assert codes_repo.get_current("ABCD1234").person_name == "Later"


def test_clear_access_codes_keeps_every_row(codes_repo, clock):
    svc = CodeRegistryService(codes_repo, clock=clock)
    svc.upload_roster([RosterRow(code="ABCD1234", person_name="A")], uploaded_by=1)

    svc.clear_access_codes()

    assert len(codes_repo.rows) == 1
    assert codes_repo.get_current("ABCD1234") is not None
