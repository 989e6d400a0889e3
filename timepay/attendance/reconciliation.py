"""Time reconciliation: punches against a resolved schedule.

`reconcile_day` is the single source of late, undertime, overtime and night
differential minutes for attendance views and payroll. It is a pure function
of its arguments and never raises for any punch/schedule/override mix.
"""

from __future__ import annotations

from dataclasses import asdict
from dataclasses import dataclass
from datetime import date
from datetime import datetime
from datetime import time
from datetime import timedelta
from decimal import ROUND_HALF_UP
from decimal import Decimal

from timepay.attendance.choices import HOLIDAY_DAY_TYPES
from timepay.attendance.choices import DayType
from timepay.shifts.resolver import ResolvedSchedule
from timepay.shifts.resolver import anchor
from timepay.shifts.resolver import to_local

# The break is only deducted from spans longer than five hours.
BREAK_DEDUCTION_THRESHOLD = timedelta(minutes=300)
NIGHT_START = time(22, 0)
NIGHT_END = time(6, 0)

_MS_PER_MINUTE = Decimal(60_000)


@dataclass(frozen=True)
class DayOverrides:
    early_in_approved: bool = False
    late_out_approved: bool = False
    late_in_approved: bool = False
    early_out_approved: bool = False
    # None keeps the shift's break; 0 means no break was taken.
    break_minutes_override: int | None = None


@dataclass(frozen=True)
class ReconciledDay:
    """Derived minutes for one day.

    `early_in_minutes` and `late_out_minutes` are the raw figures shown as
    pending overtime; the `ot_early_in_minutes` and `ot_late_out_minutes`
    counterparts only carry them once approved.
    """

    late_minutes: int = 0
    undertime_minutes: int = 0
    ot_early_in_minutes: int = 0
    ot_late_out_minutes: int = 0
    ot_rest_day_minutes: int = 0
    ot_holiday_minutes: int = 0
    ot_break_minutes: int = 0
    night_diff_minutes: int = 0
    worked_minutes: int = 0
    early_in_minutes: int = 0
    late_out_minutes: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def to_minutes(delta: timedelta) -> int:
    """Whole minutes in `delta`, rounded half-up; negative spans count as 0."""

    if delta <= timedelta(0):
        return 0
    ms = Decimal(delta // timedelta(milliseconds=1))
    return int((ms / _MS_PER_MINUTE).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def overlap(
    a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime
) -> timedelta:
    """Length of the intersection of two intervals (zero when disjoint)."""

    begin = max(a_start, b_start)
    end = min(a_end, b_end)
    return max(end - begin, timedelta(0))


def night_minutes(start: datetime, end: datetime) -> int:
    """Minutes of [start, end) falling inside any 22:00-06:00 Manila window."""

    if end <= start:
        return 0
    start, end = to_local(start), to_local(end)
    total = timedelta(0)
    day = start.date() - timedelta(days=1)
    while day <= end.date():
        window_start = anchor(day, NIGHT_START)
        window_end = anchor(day + timedelta(days=1), NIGHT_END)
        total += overlap(start, end, window_start, window_end)
        day += timedelta(days=1)
    return to_minutes(total)


def _break_overlap(
    window: tuple[datetime, datetime] | None, start: datetime, end: datetime
) -> int:
    if window is None or end <= start:
        return 0
    return to_minutes(overlap(window[0], window[1], start, end))


def _net_worked(
    start: datetime, end: datetime, raw_span: timedelta, break_minutes: int
) -> int:
    worked = to_minutes(end - start)
    if raw_span > BREAK_DEDUCTION_THRESHOLD:
        worked -= break_minutes
    return max(0, worked)


def reconcile_day(
    day: date,
    clock_in: datetime | None,
    clock_out: datetime | None,
    schedule: ResolvedSchedule,
    overrides: DayOverrides | None = None,
    day_type: str = DayType.WORKDAY,
    *,
    rest_day: bool = False,
) -> ReconciledDay:
    """Reconcile one day's punches against its schedule.

    Rules:
    - A missing punch yields all zeros; absence is classified elsewhere.
    - Late and undertime exclude time inside the fixed break window. A
      shortened break lets the employee leave that much earlier without
      undertime.
    - Early-in and late-out minutes are always reported as pending. Overtime
      and worked time only include them when the matching flag is approved.
    - On rest days and holidays all worked time is premium overtime.
    - Late and undertime are waived on rest days only, including a holiday
      that falls on a rest day (`rest_day`). A worked holiday still reports
      them.
    - Night differential uses the approval-gated effective times.
    - Break time given up (shift break minus actual break) is overtime.
    """

    overrides = overrides or DayOverrides()
    if clock_in is None or clock_out is None:
        return ReconciledDay()
    clock_in, clock_out = to_local(clock_in), to_local(clock_out)
    if clock_out <= clock_in:
        return ReconciledDay()

    shift_break = schedule.break_minutes
    effective_break = (
        shift_break
        if overrides.break_minutes_override is None
        else max(0, overrides.break_minutes_override)
    )
    break_ot = max(0, shift_break - effective_break)
    raw_span = clock_out - clock_in
    off_day = rest_day or day_type == DayType.REST_DAY

    late = undertime = early_in = late_out = 0
    if schedule.has_times:
        start, end = schedule.window(day)
        break_window = schedule.break_window(day)

        if (
            not off_day
            and not overrides.late_in_approved
            and clock_in > start + timedelta(minutes=schedule.grace_late)
        ):
            late = max(
                0, to_minutes(clock_in - start) - _break_overlap(break_window, start, clock_in)
            )

        if (
            not off_day
            and not overrides.early_out_approved
            and clock_out < end - timedelta(minutes=schedule.grace_early_out)
        ):
            counted = _break_overlap(break_window, clock_out, end)
            undertime = to_minutes(end - clock_out) - counted
            undertime -= max(0, (shift_break - effective_break) - counted)
            undertime = max(0, undertime)

        early_in = to_minutes(start - clock_in)
        late_out = to_minutes(clock_out - end)
        effective_in = clock_in if overrides.early_in_approved else max(clock_in, start)
        effective_out = clock_out if overrides.late_out_approved else min(clock_out, end)
    else:
        effective_in, effective_out = clock_in, clock_out

    if effective_out > effective_in:
        worked = _net_worked(effective_in, effective_out, raw_span, effective_break)
        night = night_minutes(effective_in, effective_out)
    else:
        worked = night = 0

    return ReconciledDay(
        late_minutes=late,
        undertime_minutes=undertime,
        ot_early_in_minutes=early_in if overrides.early_in_approved else 0,
        ot_late_out_minutes=late_out if overrides.late_out_approved else 0,
        ot_rest_day_minutes=worked if day_type == DayType.REST_DAY else 0,
        ot_holiday_minutes=worked if day_type in HOLIDAY_DAY_TYPES else 0,
        ot_break_minutes=break_ot,
        night_diff_minutes=night,
        worked_minutes=worked,
        early_in_minutes=early_in,
        late_out_minutes=late_out,
    )
