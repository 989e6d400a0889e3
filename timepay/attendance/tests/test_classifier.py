import datetime as dt

from timepay.attendance.choices import AttendanceStatus
from timepay.attendance.choices import DayType
from timepay.attendance.classifier import HolidayInfo
from timepay.attendance.classifier import classify_day
from timepay.shifts.resolver import MANILA
from timepay.shifts.resolver import ResolvedSchedule

SCHEDULE = ResolvedSchedule(
    start_time=dt.time(9, 0), end_time=dt.time(18, 0), break_minutes=60
)
NEW_YEAR = HolidayInfo(name="New Year's Day", holiday_type="REGULAR")


def at(hour, minute=0):
    return dt.datetime(2026, 1, 1, hour, minute, tzinfo=MANILA)


def test_punches_win_over_everything_else():
    result = classify_day(
        clock_in=at(9),
        clock_out=at(18),
        schedule=SCHEDULE,
        holiday=NEW_YEAR,
        leave_type="VL",
    )
    assert result.attendance_status == AttendanceStatus.PRESENT
    # A worked holiday keeps its holiday day type for premium pay.
    assert result.day_type == DayType.REGULAR_HOLIDAY
    assert result.holiday_name == "New Year's Day"


def test_short_day_is_half_day():
    result = classify_day(clock_in=at(9), clock_out=at(13), schedule=SCHEDULE)
    assert result.attendance_status == AttendanceStatus.HALF_DAY


def test_single_punch_is_still_present():
    result = classify_day(clock_in=at(9), clock_out=None, schedule=SCHEDULE)
    assert result.attendance_status == AttendanceStatus.PRESENT


def test_approved_leave_beats_holiday():
    result = classify_day(
        clock_in=None, clock_out=None, schedule=SCHEDULE, holiday=NEW_YEAR, leave_type="VL"
    )
    assert result.attendance_status == AttendanceStatus.ON_LEAVE
    assert result.leave_type == "VL"


def test_special_holiday_without_punches():
    holiday = HolidayInfo(name="Ninoy Aquino Day", holiday_type="SPECIAL")
    result = classify_day(clock_in=None, clock_out=None, schedule=SCHEDULE, holiday=holiday)
    assert result.attendance_status == AttendanceStatus.SPECIAL_HOLIDAY
    assert result.day_type == DayType.SPECIAL_HOLIDAY


def test_stored_values_apply_before_weekend_default():
    rest = classify_day(
        clock_in=None, clock_out=None, schedule=SCHEDULE, stored_day_type=DayType.REST_DAY
    )
    absent = classify_day(
        clock_in=None,
        clock_out=None,
        schedule=ResolvedSchedule(is_rest_day=True),
        stored_status=AttendanceStatus.ABSENT,
    )
    assert rest.attendance_status == AttendanceStatus.REST_DAY
    assert absent.attendance_status == AttendanceStatus.ABSENT


def test_weekend_without_shift_is_rest_day():
    result = classify_day(
        clock_in=None, clock_out=None, schedule=ResolvedSchedule(is_rest_day=True)
    )
    assert result.attendance_status == AttendanceStatus.REST_DAY
    assert result.day_type == DayType.REST_DAY


def test_fallback_depends_on_record_presence():
    absent = classify_day(clock_in=None, clock_out=None, schedule=SCHEDULE)
    no_data = classify_day(
        clock_in=None, clock_out=None, schedule=SCHEDULE, has_record=False
    )
    assert absent.attendance_status == AttendanceStatus.ABSENT
    assert no_data.attendance_status == AttendanceStatus.NO_DATA


def test_holiday_on_rest_day_keeps_holiday_type_and_flags_rest_day():
    result = classify_day(
        clock_in=at(9),
        clock_out=at(15),
        schedule=ResolvedSchedule(is_rest_day=True),
        holiday=NEW_YEAR,
    )
    assert result.day_type == DayType.REGULAR_HOLIDAY
    assert result.is_rest_day is True

    workday = classify_day(clock_in=at(9), clock_out=at(18), schedule=SCHEDULE, holiday=NEW_YEAR)
    assert workday.is_rest_day is False
