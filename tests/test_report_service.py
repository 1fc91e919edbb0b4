from __future__ import annotations

from datetime import date, datetime

import pytest

from src.geo_attendance.geo_attendance.core.enums import AttendanceStatus
from src.geo_attendance.geo_attendance.core.exceptions import AuthorizationError, ValidationError

TODAY = date(2026, 2, 5)


@pytest.fixture
def seeded(attendance_repo, record_factory):
    attendance_repo.add(record_factory(1, 4, datetime(2026, 2, 5, 9, 0), datetime(2026, 2, 5, 18, 0)))
    attendance_repo.add(
        record_factory(2, 4, datetime(2026, 2, 4, 9, 0), datetime(2026, 2, 4, 14, 0), status=AttendanceStatus.HALF_DAY)
    )
    attendance_repo.add(record_factory(3, 3, datetime(2026, 2, 5, 10, 30), status=AttendanceStatus.HALF_DAY))
    attendance_repo.add(record_factory(4, 4, datetime(2026, 1, 20, 9, 0), datetime(2026, 1, 20, 16, 0)))
    return attendance_repo


def test_analytics_totals(container, seeded):
    a = container.report_service.analytics(requested_by=1, today=TODAY)

    assert a.total_employees == 1
    assert a.present_today == 2
    assert a.total_attendance_records == 4
    # (9 + 5 + 7) / 3; the open record is skipped
    assert a.avg_working_hours == 7.0


def test_analytics_breakdown_and_daily_counts(container, seeded):
    a = container.report_service.analytics(requested_by=2, today=TODAY).as_dict()

    assert a["status_breakdown"] == {"present": 1, "half_day": 1, "absent": 0}
    assert list(a["daily_counts"]) == [
        "2026-01-30",
        "2026-01-31",
        "2026-02-01",
        "2026-02-02",
        "2026-02-03",
        "2026-02-04",
        "2026-02-05",
    ]
    assert a["daily_counts"]["2026-02-05"] == 2
    assert a["daily_counts"]["2026-02-04"] == 1
    assert sum(a["daily_counts"].values()) == 3


def test_analytics_without_completed_records(container):
    a = container.report_service.analytics(requested_by=1, today=TODAY)

    assert a.avg_working_hours == 0
    assert a.present_today == 0


def test_analytics_denied_for_employee(container):
    with pytest.raises(AuthorizationError):
        container.report_service.analytics(requested_by=4, today=TODAY)


def test_export_rows_filters_by_range(container, seeded):
    rows = container.report_service.export_rows(requested_by=1, start=date(2026, 2, 1), end=TODAY)

    assert len(rows) == 3
    open_row = next(r for r in rows if r["user_id"] == 3)
    assert open_row["punch_out"] == "-"
    assert open_row["working_hours"] == "-"
    assert open_row["full_name"] == "Team Manager"

    full_day = next(r for r in rows if r["work_date"] == "2026-02-05" and r["user_id"] == 4)
    assert full_day["punch_in"] == "09:00"
    assert full_day["working_hours"] == "9.00"


def test_export_rows_rejects_inverted_range(container):
    with pytest.raises(ValidationError):
        container.report_service.export_rows(requested_by=1, start=TODAY, end=date(2026, 2, 1))
