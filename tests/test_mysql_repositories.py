from __future__ import annotations

from datetime import date, datetime

import pytest
from mysql.connector import errorcode
from mysql.connector import errors as mysql_errors

from src.geo_attendance.geo_attendance.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.geo_attendance.geo_attendance.common.geo import GeoPoint
from src.geo_attendance.geo_attendance.core.enums import AttendanceStatus, Role
from src.geo_attendance.geo_attendance.core.exceptions import DuplicatePunchInError, ValidationError
from src.geo_attendance.geo_attendance.users.mysql_user_repository import MySQLUserRepository


class FailingCursor:
    def __init__(self, error: Exception):
        self._error = error
        self.closed = False

    def execute(self, sql, params=None):
        raise self._error

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FailingCursor):
        self._cursor = cursor
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        raise AssertionError("commit after a failed statement")

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self, error: Exception):
        self.conn = FakeConnection(FailingCursor(error))

    def connect(self, *, with_database: bool = True):
        return self.conn


def duplicate_key() -> mysql_errors.IntegrityError:
    return mysql_errors.IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY)


def punch_in(repo: MySQLAttendanceRepository) -> int:
    return repo.create_punch_in(
        user_id=4,
        work_date=date(2026, 2, 2),
        punch_in_time=datetime(2026, 2, 2, 9, 5),
        location=GeoPoint(latitude=28.460315, longitude=77.0336622),
        distance=0,
        status=AttendanceStatus.PRESENT,
    )


def test_concurrent_punch_in_maps_unique_key_to_duplicate():
    factory = FakeConnectionFactory(duplicate_key())

    with pytest.raises(DuplicatePunchInError, match="Already punched in today"):
        punch_in(MySQLAttendanceRepository(factory))

    assert factory.conn.rolled_back
    assert factory.conn.closed


def test_other_integrity_errors_propagate_from_punch_in():
    factory = FakeConnectionFactory(
        mysql_errors.IntegrityError(msg="Cannot add a child row", errno=errorcode.ER_NO_REFERENCED_ROW_2)
    )

    with pytest.raises(mysql_errors.IntegrityError):
        punch_in(MySQLAttendanceRepository(factory))


def test_concurrent_user_insert_maps_unique_key_to_validation_error():
    repo = MySQLUserRepository(FakeConnectionFactory(duplicate_key()))

    with pytest.raises(ValidationError, match="Username already exists"):
        repo.create(full_name="Jane Roe", username="emp002", email="", role=Role.EMPLOYEE)
