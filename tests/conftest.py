from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.geo_attendance.geo_attendance.attendance.model import AttendanceRecord, AttendanceReportRow
from src.geo_attendance.geo_attendance.common.geo import GeoPoint, OfficeLocation
from src.geo_attendance.geo_attendance.container import wire
from src.geo_attendance.geo_attendance.core.enums import AttendanceStatus, NotificationKind, Role
from src.geo_attendance.geo_attendance.notifications.model import Notification
from src.geo_attendance.geo_attendance.users.model import User

OFFICE_POINT = GeoPoint(latitude=28.460315, longitude=77.0336622)

# About 223m north of the office.
FAR_POINT = GeoPoint(latitude=28.462315, longitude=77.0336622)


class InMemoryUsers:
    def __init__(self, users: list[User]):
        self.users_by_id = {u.user_id: u for u in users}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users_by_id.get(user_id)

    def list_all(self):
        return sorted(self.users_by_id.values(), key=lambda u: u.user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users_by_id.values() if u.username == username), None)

    def count_by_role(self, role: Role) -> int:
        return sum(1 for u in self.users_by_id.values() if u.role == role)

    def create(self, *, full_name: str, username: str, email: str, role: Role) -> int:
        user_id = max(self.users_by_id, default=0) + 1
        self.users_by_id[user_id] = User(
            user_id=user_id, full_name=full_name, username=username, email=email, role=role
        )
        return user_id


class InMemoryAttendance:
    def __init__(self, users: Optional[InMemoryUsers] = None):
        self._by_user_date: dict[tuple[int, date], AttendanceRecord] = {}
        self._users = users
        self._id = 0

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_user_date.get((user_id, work_date))

    def list_for_user(self, user_id: int):
        items = [r for r in self._by_user_date.values() if r.user_id == user_id]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items

    def create_punch_in(self, *, user_id, work_date, punch_in_time, location, distance, status) -> int:
        self._id += 1
        self._by_user_date[(user_id, work_date)] = AttendanceRecord(
            attendance_id=self._id,
            user_id=user_id,
            work_date=work_date,
            punch_in_time=punch_in_time,
            punch_in_location=location,
            distance=distance,
            status=status,
        )
        return self._id

    def update_punch_out(self, *, attendance_id, punch_out_time, location, status, working_hours) -> bool:
        for k, v in list(self._by_user_date.items()):
            if v.attendance_id == attendance_id and v.punch_out_time is None:
                self._by_user_date[k] = replace(
                    v,
                    punch_out_time=punch_out_time,
                    punch_out_location=location,
                    status=status,
                    working_hours=working_hours,
                )
                return True
        return False

    def get_report_rows(self, *, start_date=None, end_date=None):
        rows = []
        for r in sorted(self._by_user_date.values(), key=lambda r: (r.work_date, -r.user_id), reverse=True):
            if start_date and r.work_date < start_date:
                continue
            if end_date and r.work_date > end_date:
                continue
            user = self._users.get_by_id(r.user_id) if self._users else None
            rows.append(
                AttendanceReportRow(
                    record=r,
                    full_name=user.full_name if user else "Unknown",
                    username=user.username if user else None,
                )
            )
        return rows

    def add(self, record: AttendanceRecord) -> None:
        self._by_user_date[(record.user_id, record.work_date)] = record


class InMemoryNotifications:
    def __init__(self):
        self.items: dict[int, Notification] = {}
        self._id = 0

    def create(self, *, user_id: int, message: str, kind: NotificationKind, created_at: datetime) -> int:
        self._id += 1
        self.items[self._id] = Notification(
            notification_id=self._id,
            user_id=user_id,
            message=message,
            kind=kind,
            created_at=created_at,
        )
        return self._id

    def list_for_user(self, user_id: int):
        items = [n for n in self.items.values() if n.user_id == user_id]
        items.sort(key=lambda n: (n.created_at, n.notification_id), reverse=True)
        return items

    def mark_read(self, notification_id: int, user_id: int) -> bool:
        n = self.items.get(notification_id)
        if not n or n.user_id != user_id or n.is_read:
            return False
        self.items[notification_id] = replace(n, is_read=True)
        return True


def make_record(
    attendance_id: int,
    user_id: int,
    punch_in: datetime,
    punch_out: Optional[datetime] = None,
    status: AttendanceStatus = AttendanceStatus.PRESENT,
) -> AttendanceRecord:
    hours = None
    if punch_out:
        hours = round((punch_out - punch_in).total_seconds() / 3600, 2)
    return AttendanceRecord(
        attendance_id=attendance_id,
        user_id=user_id,
        work_date=punch_in.date(),
        punch_in_time=punch_in,
        punch_in_location=OFFICE_POINT,
        distance=0,
        status=status,
        punch_out_time=punch_out,
        punch_out_location=OFFICE_POINT if punch_out else None,
        working_hours=hours,
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 5, 0)


@pytest.fixture
def office() -> OfficeLocation:
    return OfficeLocation(point=OFFICE_POINT, allowed_radius=200)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers(
        [
            User(user_id=1, full_name="Admin User", username="admin", email="admin@company.com", role=Role.ADMIN),
            User(user_id=2, full_name="HR Manager", username="hr001", email="hr@company.com", role=Role.HR),
            User(user_id=3, full_name="Team Manager", username="mgr001", email="manager@company.com", role=Role.MANAGER),
            User(user_id=4, full_name="John Doe", username="emp001", email="john@company.com", role=Role.EMPLOYEE),
        ]
    )


@pytest.fixture
def attendance_repo(users_repo) -> InMemoryAttendance:
    return InMemoryAttendance(users_repo)


@pytest.fixture
def notifications_repo() -> InMemoryNotifications:
    return InMemoryNotifications()


@pytest.fixture
def container(users_repo, attendance_repo, notifications_repo, office):
    return wire(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        notifications_repo=notifications_repo,
        office=office,
    )


@pytest.fixture
def office_point() -> GeoPoint:
    return OFFICE_POINT


@pytest.fixture
def far_point() -> GeoPoint:
    return FAR_POINT


@pytest.fixture
def record_factory():
    return make_record
