from __future__ import annotations

from dataclasses import dataclass

from .codes.mysql_access_code_repository import MySQLAccessCodeRepository
from .codes.service import CodeRegistryService
from .core.constants import DEFAULT_REPORT_TIMEZONE
from .database.connection import DatabaseConnection, DBConfig
from .reports.service import ScanReportService
from .scans.mysql_scan_log_repository import MySQLScanLogRepository
from .scans.service import ScanService
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: MySQLUserRepository
    codes_repo: MySQLAccessCodeRepository
    scans_repo: MySQLScanLogRepository

    auth_service: AuthService
    user_service: UserService
    code_registry_service: CodeRegistryService
    scan_service: ScanService
    scan_report_service: ScanReportService


def build_container(*, db_config: dict, report_timezone: str = DEFAULT_REPORT_TIMEZONE) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    users_repo = MySQLUserRepository(conn)
    codes_repo = MySQLAccessCodeRepository(conn)
    scans_repo = MySQLScanLogRepository(conn)

    return Container(
        conn=conn,
        users_repo=users_repo,
        codes_repo=codes_repo,
        scans_repo=scans_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        code_registry_service=CodeRegistryService(codes_repo),
        scan_service=ScanService(scans_repo, codes_repo),
        scan_report_service=ScanReportService(scans_repo, codes_repo, timezone_name=report_timezone),
    )
