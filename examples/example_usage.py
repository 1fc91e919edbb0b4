"""Example: evaluate punches with the rule engine directly (no Flask, no DB)."""

from src.geo_attendance.geo_attendance.attendance.engine import AttendanceStatusEngine
from src.geo_attendance.geo_attendance.common.geo import GeoPoint, OfficeLocation
from src.geo_attendance.geo_attendance.core.exceptions import PunchError


def main():
    office = OfficeLocation(point=GeoPoint(28.460315, 77.0336622), allowed_radius=200)
    engine = AttendanceStatusEngine(office)

    print(engine.evaluate_punch_in(9 * 60 + 5, GeoPoint(28.460315, 77.0336622)))
    print(engine.evaluate_punch_out(570, 18 * 60, 8.5))

    try:
        engine.evaluate_punch_in(9 * 60 + 30, GeoPoint(28.47, 77.0336622))
    except PunchError as e:
        print("rejected:", e)


if __name__ == "__main__":
    main()
