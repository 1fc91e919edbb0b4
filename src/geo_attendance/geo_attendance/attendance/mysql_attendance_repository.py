from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from mysql.connector import errorcode
from mysql.connector import errors as mysql_errors

from ..common.geo import GeoPoint
from ..core.enums import AttendanceStatus
from ..core.exceptions import DuplicatePunchInError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository

_RECORD_COLUMNS = """
    ar.attendance_id, ar.user_id, ar.work_date,
    ar.punch_in_time, ar.punch_in_latitude, ar.punch_in_longitude, ar.distance_m,
    ar.punch_out_time, ar.punch_out_latitude, ar.punch_out_longitude,
    ar.status, ar.working_hours
"""


def _point(lat, lon) -> Optional[GeoPoint]:
    if lat is None or lon is None:
        return None
    return GeoPoint(latitude=float(lat), longitude=float(lon))


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        user_id=int(r["user_id"]),
        work_date=r["work_date"],
        punch_in_time=r["punch_in_time"],
        punch_in_location=_point(r["punch_in_latitude"], r["punch_in_longitude"]),
        distance=int(r["distance_m"]),
        status=AttendanceStatus(r["status"]),
        punch_out_time=r.get("punch_out_time"),
        punch_out_location=_point(r.get("punch_out_latitude"), r.get("punch_out_longitude")),
        # DECIMAL columns come back as Decimal.
        working_hours=float(r["working_hours"]) if r.get("working_hours") is not None else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance_records ar
                WHERE ar.user_id=%s AND ar.work_date=%s
                """,
                (user_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance_records ar
                WHERE ar.user_id=%s
                ORDER BY ar.work_date DESC
                """,
                (user_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create_punch_in(
        self,
        *,
        user_id: int,
        work_date: date,
        punch_in_time: datetime,
        location: GeoPoint,
        distance: int,
        status: AttendanceStatus,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(
                        user_id, work_date, punch_in_time, punch_in_latitude, punch_in_longitude, distance_m, status
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (user_id, work_date, punch_in_time, location.latitude, location.longitude, distance, status.value),
                )
                return int(cur.lastrowid)
        except mysql_errors.IntegrityError as e:
            # uq_attendance_user_day: a concurrent punch-in won.
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise DuplicatePunchInError() from e
            raise

    def update_punch_out(
        self,
        *,
        attendance_id: int,
        punch_out_time: datetime,
        location: GeoPoint,
        status: AttendanceStatus,
        working_hours: float,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET punch_out_time=%s, punch_out_latitude=%s, punch_out_longitude=%s,
                    status=%s, working_hours=%s
                WHERE attendance_id=%s AND punch_out_time IS NULL
                """,
                (punch_out_time, location.latitude, location.longitude, status.value, working_hours, attendance_id),
            )
            return cur.rowcount > 0

    def get_report_rows(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceReportRow]:
        clauses = ["1=1"]
        params: list[object] = []

        if start_date is not None:
            clauses.append("ar.work_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("ar.work_date <= %s")
            params.append(end_date)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS},
                       COALESCE(u.full_name, 'Unknown') AS full_name, u.username
                FROM attendance_records ar
                LEFT JOIN users u ON u.user_id = ar.user_id
                WHERE {where}
                ORDER BY ar.work_date DESC, ar.user_id ASC
                """,
                tuple(params),
            )
            return [
                AttendanceReportRow(record=_to_record(r), full_name=r["full_name"], username=r.get("username"))
                for r in fetchall(cur)
            ]
