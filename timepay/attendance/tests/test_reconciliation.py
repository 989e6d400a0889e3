import datetime as dt

from timepay.attendance.choices import DayType
from timepay.attendance.reconciliation import DayOverrides
from timepay.attendance.reconciliation import night_minutes
from timepay.attendance.reconciliation import reconcile_day
from timepay.attendance.reconciliation import to_minutes
from timepay.shifts.resolver import MANILA
from timepay.shifts.resolver import ResolvedSchedule

DAY = dt.date(2026, 3, 3)

NINE_TO_SIX = ResolvedSchedule(
    start_time=dt.time(9, 0),
    end_time=dt.time(18, 0),
    break_minutes=60,
    break_start=dt.time(12, 0),
    break_end=dt.time(13, 0),
)


def at(hour, minute=0, day=DAY):
    return dt.datetime.combine(day, dt.time(hour, minute), tzinfo=MANILA)


def test_late_arrival_counts_minutes_after_start():
    result = reconcile_day(DAY, at(9, 10), at(18, 0), NINE_TO_SIX)
    assert result.late_minutes == 10
    assert result.undertime_minutes == 0
    assert result.worked_minutes == 470


def test_unapproved_early_in_is_pending_only():
    result = reconcile_day(DAY, at(8, 30), at(18, 0), NINE_TO_SIX)
    assert result.late_minutes == 0
    assert result.worked_minutes == 480
    assert result.ot_early_in_minutes == 0
    assert result.early_in_minutes == 30


def test_approved_early_in_is_overtime_and_worked():
    overrides = DayOverrides(early_in_approved=True)
    result = reconcile_day(DAY, at(8, 30), at(18, 0), NINE_TO_SIX, overrides)
    assert result.ot_early_in_minutes == 30
    assert result.worked_minutes == 510


def test_rest_day_short_span_has_no_break_deduction():
    schedule = ResolvedSchedule(is_rest_day=True)
    result = reconcile_day(DAY, at(9), at(13), schedule, day_type=DayType.REST_DAY)
    assert result.worked_minutes == 240
    assert result.ot_rest_day_minutes == 240
    assert result.late_minutes == 0


def test_overnight_shift_night_differential_covers_full_window():
    schedule = ResolvedSchedule(
        start_time=dt.time(21, 0),
        end_time=dt.time(6, 0),
        break_minutes=60,
        is_overnight=True,
    )
    next_day = DAY + dt.timedelta(days=1)
    result = reconcile_day(DAY, at(21), at(7, day=next_day), schedule)
    assert result.night_diff_minutes == 480
    assert result.late_out_minutes == 60
    assert result.ot_late_out_minutes == 0


def test_late_out_only_counts_when_approved():
    pending = reconcile_day(DAY, at(9), at(19, 30), NINE_TO_SIX)
    approved = reconcile_day(
        DAY, at(9), at(19, 30), NINE_TO_SIX, DayOverrides(late_out_approved=True)
    )
    assert pending.late_out_minutes == 90
    assert pending.ot_late_out_minutes == 0
    assert pending.worked_minutes == 480
    assert approved.ot_late_out_minutes == 90
    assert approved.worked_minutes == 570


def test_missing_punch_yields_zeros():
    result = reconcile_day(DAY, at(9), None, NINE_TO_SIX)
    assert all(value == 0 for value in result.as_dict().values())


def test_lateness_excludes_break_window():
    # Arriving at 13:30: 4h30 late minus the 12:00-13:00 break.
    result = reconcile_day(DAY, at(13, 30), at(18), NINE_TO_SIX)
    assert result.late_minutes == 210


def test_undertime_excludes_break_window():
    result = reconcile_day(DAY, at(9), at(12, 30), NINE_TO_SIX)
    # 5h30 early minus the 30 minutes of break still ahead.
    assert result.undertime_minutes == 300


def test_shortened_break_allows_early_departure():
    overrides = DayOverrides(break_minutes_override=30)
    result = reconcile_day(DAY, at(9), at(17, 30), NINE_TO_SIX, overrides)
    assert result.undertime_minutes == 0
    assert result.ot_break_minutes == 30


def test_grace_period_suppresses_lateness():
    schedule = ResolvedSchedule(
        start_time=dt.time(9, 0), end_time=dt.time(18, 0), break_minutes=60, grace_late=15
    )
    assert reconcile_day(DAY, at(9, 10), at(18), schedule).late_minutes == 0
    assert reconcile_day(DAY, at(9, 20), at(18), schedule).late_minutes == 20


def test_approved_late_in_and_early_out_clear_penalties():
    overrides = DayOverrides(late_in_approved=True, early_out_approved=True)
    result = reconcile_day(DAY, at(10), at(16), NINE_TO_SIX, overrides)
    assert result.late_minutes == 0
    assert result.undertime_minutes == 0


def test_holiday_work_is_all_holiday_overtime():
    result = reconcile_day(
        DAY, at(9), at(18), NINE_TO_SIX, day_type=DayType.REGULAR_HOLIDAY
    )
    assert result.ot_holiday_minutes == result.worked_minutes == 480
    assert result.ot_rest_day_minutes == 0
    assert result.late_minutes == 0


def test_worked_holiday_still_reports_lateness_and_undertime():
    result = reconcile_day(
        DAY, at(10), at(17), NINE_TO_SIX, day_type=DayType.SPECIAL_HOLIDAY
    )
    assert result.late_minutes == 60
    assert result.undertime_minutes == 60
    assert result.ot_holiday_minutes == result.worked_minutes


def test_holiday_on_rest_day_waives_lateness():
    result = reconcile_day(
        DAY,
        at(10),
        at(18),
        NINE_TO_SIX,
        day_type=DayType.REGULAR_HOLIDAY,
        rest_day=True,
    )
    assert result.late_minutes == 0
    assert result.ot_holiday_minutes == result.worked_minutes
    assert result.ot_rest_day_minutes == 0


def test_utc_punches_are_read_as_manila_time():
    clock_in = dt.datetime(2026, 3, 3, 1, 10, tzinfo=dt.UTC)
    clock_out = dt.datetime(2026, 3, 3, 10, 0, tzinfo=dt.UTC)
    result = reconcile_day(DAY, clock_in, clock_out, NINE_TO_SIX)
    assert result.late_minutes == 10


def test_minutes_round_half_up_from_milliseconds():
    assert to_minutes(dt.timedelta(seconds=29, milliseconds=999)) == 0
    assert to_minutes(dt.timedelta(seconds=30)) == 1
    assert to_minutes(dt.timedelta(minutes=-5)) == 0


def test_night_minutes_split_across_midnight():
    assert night_minutes(at(23), at(2, day=DAY + dt.timedelta(days=1))) == 180
    assert night_minutes(at(5), at(7)) == 60


def test_derived_minutes_are_never_negative():
    schedules = [
        NINE_TO_SIX,
        ResolvedSchedule(),
        ResolvedSchedule(start_time=dt.time(22), end_time=dt.time(7), break_minutes=60),
    ]
    punches = [
        (at(0, 5), at(23, 55)),
        (at(17), at(17, 1)),
        (at(8), at(9)),
        (at(12, 15), at(12, 45)),
        (at(21), at(8, day=DAY + dt.timedelta(days=1))),
    ]
    overrides = [
        DayOverrides(),
        DayOverrides(True, True, True, True, 0),
        DayOverrides(break_minutes_override=120),
    ]
    for schedule in schedules:
        for clock_in, clock_out in punches:
            for override in overrides:
                for day_type in DayType.values:
                    result = reconcile_day(
                        DAY, clock_in, clock_out, schedule, override, day_type
                    )
                    for value in result.as_dict().values():
                        assert isinstance(value, int)
                        assert value >= 0
