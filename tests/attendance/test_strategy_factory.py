from src.geo_attendance.geo_attendance.attendance.factory import AttendanceStrategyFactory
from src.geo_attendance.geo_attendance.attendance.strategies.early_strategy import EarlyLeaveStrategy
from src.geo_attendance.geo_attendance.attendance.strategies.hours_strategy import PartialHoursStrategy, ShortHoursStrategy
from src.geo_attendance.geo_attendance.attendance.strategies.late_strategy import LateStrategy
from src.geo_attendance.geo_attendance.attendance.strategies.normal_strategy import FallbackStrategy, NormalStrategy


def test_factory_punch_in_on_time_until_ten_past_ten():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_punch_in(now_minutes=610)

    assert isinstance(strategy, NormalStrategy)


def test_factory_punch_in_late_after_ten_past_ten():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_punch_in(now_minutes=611)

    assert isinstance(strategy, LateStrategy)


def test_factory_punch_out_rungs():
    factory = AttendanceStrategyFactory()

    assert isinstance(factory.for_punch_out(punch_in_minutes=570, now_minutes=780, working_hours=3.5), ShortHoursStrategy)
    assert isinstance(factory.for_punch_out(punch_in_minutes=570, now_minutes=870, working_hours=5.0), PartialHoursStrategy)
    assert isinstance(factory.for_punch_out(punch_in_minutes=620, now_minutes=1090, working_hours=7.8), LateStrategy)
    assert isinstance(factory.for_punch_out(punch_in_minutes=570, now_minutes=1080, working_hours=8.5), NormalStrategy)
    assert isinstance(factory.for_punch_out(punch_in_minutes=570, now_minutes=1000, working_hours=7.1), EarlyLeaveStrategy)
    assert isinstance(factory.for_punch_out(punch_in_minutes=530, now_minutes=1080, working_hours=9.1), FallbackStrategy)


def test_factory_thresholds_are_configurable():
    factory = AttendanceStrategyFactory(late_after=9 * 60 + 30)

    assert isinstance(factory.for_punch_in(now_minutes=580), LateStrategy)
