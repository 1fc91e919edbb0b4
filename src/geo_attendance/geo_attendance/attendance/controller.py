from __future__ import annotations

import csv
import io
from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.geo import GeoPoint
from ..common.http import current_user_id, json_body, json_endpoint
from ..container import Container
from ..core.exceptions import ValidationError
from ..reports.service import EXPORT_FIELDS


def register(app: Flask, container: Container) -> None:
    @app.route("/api/punch-in", methods=["POST"], endpoint="punch_in")
    @json_endpoint
    def punch_in():
        location = GeoPoint.from_payload(json_body())
        result = container.attendance_service.punch_in(current_user_id(), location)
        return jsonify(result.as_dict())

    @app.route("/api/punch-out", methods=["POST"], endpoint="punch_out")
    @json_endpoint
    def punch_out():
        location = GeoPoint.from_payload(json_body())
        result = container.attendance_service.punch_out(current_user_id(), location)
        return jsonify(result.as_dict())

    @app.route("/api/attendance/me", methods=["GET"], endpoint="my_attendance")
    @json_endpoint
    def my_attendance():
        return jsonify(container.attendance_service.history_for_user(current_user_id()))

    @app.route("/api/attendance", methods=["GET"], endpoint="all_attendance")
    @json_endpoint
    def all_attendance():
        return jsonify(container.attendance_service.all_records(requested_by=current_user_id()))

    def _parse_date_arg(name: str, default: date) -> date:
        value = request.args.get(name)
        if not value:
            return default
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"{name} must be YYYY-MM-DD")

    @app.route("/api/attendance/export.csv", methods=["GET"], endpoint="attendance_export_csv")
    @json_endpoint
    def attendance_export_csv():
        today = now_local().date()
        start = _parse_date_arg("start", today.replace(day=1))
        end = _parse_date_arg("end", today)

        rows = container.report_service.export_rows(requested_by=current_user_id(), start=start, end=end)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=EXPORT_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        filename = f"attendance_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
