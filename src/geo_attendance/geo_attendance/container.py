from __future__ import annotations

from dataclasses import dataclass

from .attendance.engine import AttendanceStatusEngine
from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.geo import OfficeLocation
from .database.connection import DBConfig, DatabaseConnection
from .notifications.mysql_notification_repository import MySQLNotificationRepository
from .notifications.repository import NotificationRepository
from .notifications.service import NotificationService
from .reports.service import ReportService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    attendance_repo: AttendanceRepository
    notifications_repo: NotificationRepository

    engine: AttendanceStatusEngine
    attendance_service: AttendanceService
    notification_service: NotificationService
    user_service: UserService
    report_service: ReportService


def wire(
    *,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    notifications_repo: NotificationRepository,
    office: OfficeLocation,
) -> Container:
    """Assemble services on top of any repository implementation."""
    engine = AttendanceStatusEngine(office, strategy_factory=AttendanceStrategyFactory())
    notification_service = NotificationService(notifications_repo)
    attendance_service = AttendanceService(attendance_repo, users_repo, notification_service, engine)
    user_service = UserService(users_repo)
    report_service = ReportService(attendance_repo, users_repo)

    return Container(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        notifications_repo=notifications_repo,
        engine=engine,
        attendance_service=attendance_service,
        notification_service=notification_service,
        user_service=user_service,
        report_service=report_service,
    )


def build_container(*, db_config: dict, office: OfficeLocation) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        notifications_repo=MySQLNotificationRepository(conn),
        office=office,
    )
