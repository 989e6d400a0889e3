"""Schedule resolution for one employee on one date.

Shift templates store wall-clock Manila times. Every absolute timestamp is
built by anchoring to local midnight of the attendance date and adding the
hour/minute offset, so results never depend on the host's timezone.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace
from datetime import date
from datetime import datetime
from datetime import time
from datetime import timedelta
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

if TYPE_CHECKING:
    from collections.abc import Collection

    from timepay.shifts.models import ShiftTemplate

MANILA = ZoneInfo("Asia/Manila")


def anchor(day: date, at: time) -> datetime:
    """Return the aware Manila datetime for wall-clock `at` on `day`."""

    midnight = datetime.combine(day, time.min, tzinfo=MANILA)
    return midnight + timedelta(hours=at.hour, minutes=at.minute, seconds=at.second)


def to_local(value: datetime) -> datetime:
    """Express a punch in Manila time; naive values are taken as Manila wall-clock."""

    if value.tzinfo is None:
        return value.replace(tzinfo=MANILA)
    return value.astimezone(MANILA)


@dataclass(frozen=True)
class ResolvedSchedule:
    start_time: time | None = None
    end_time: time | None = None
    break_minutes: int = 0
    break_start: time | None = None
    break_end: time | None = None
    grace_late: int = 0
    grace_early_out: int = 0
    is_overnight: bool = False
    is_rest_day: bool = False
    scheduled_work_minutes: int = 0
    shift_code: str = ""

    @classmethod
    def from_shift(cls, shift: ShiftTemplate) -> ResolvedSchedule:
        schedule = cls(
            start_time=shift.start_time,
            end_time=shift.end_time,
            break_minutes=shift.break_minutes or 0,
            break_start=shift.break_start_time,
            break_end=shift.break_end_time,
            grace_late=shift.grace_minutes_late or 0,
            grace_early_out=shift.grace_minutes_early_out or 0,
            is_overnight=bool(shift.is_overnight),
            shift_code=shift.code,
        )
        minutes = shift.scheduled_work_minutes
        if minutes is None:
            span = schedule.window(date(2000, 1, 3))
            gross = int((span[1] - span[0]).total_seconds() // 60)
            minutes = max(0, gross - schedule.break_minutes)
        return replace(schedule, scheduled_work_minutes=minutes)

    @property
    def has_times(self) -> bool:
        return self.start_time is not None and self.end_time is not None

    @property
    def rolls_over(self) -> bool:
        return bool(self.has_times and (self.is_overnight or self.end_time < self.start_time))

    def window(self, day: date) -> tuple[datetime, datetime]:
        """Scheduled start and end anchored to `day`; overnight ends roll forward."""

        start = anchor(day, self.start_time)
        end = anchor(day, self.end_time)
        if self.rolls_over:
            end = anchor(day + timedelta(days=1), self.end_time)
        return start, end

    def break_window(self, day: date) -> tuple[datetime, datetime] | None:
        """Fixed break window relative to the shift anchored on `day`.

        On an overnight shift a break starting before the shift start belongs
        to the next day; a break whose end is not after its start ends on the
        following day.
        """

        if not self.has_times or self.break_start is None or self.break_end is None:
            return None
        break_day = day
        if self.rolls_over and self.break_start < self.start_time:
            break_day = day + timedelta(days=1)
        begin = anchor(break_day, self.break_start)
        finish = anchor(break_day, self.break_end)
        if finish <= begin:
            finish = anchor(break_day + timedelta(days=1), self.break_end)
        return begin, finish


def resolve_schedule(
    day: date,
    *,
    day_shift: ShiftTemplate | None = None,
    default_shift: ShiftTemplate | None = None,
    weekly_off: Collection[int] = (5, 6),
) -> ResolvedSchedule:
    """Pick the schedule that applies to `day`.

    Priority:
    - the day's own shift (the shift actually imported for that date);
    - a weekly off day without its own shift is a rest day with no schedule;
    - the employee's default shift;
    - otherwise an unscheduled working day (no times).
    """

    if day_shift is not None:
        return ResolvedSchedule.from_shift(day_shift)
    if day.weekday() in weekly_off:
        return ResolvedSchedule(is_rest_day=True)
    if default_shift is not None:
        return ResolvedSchedule.from_shift(default_shift)
    return ResolvedSchedule()
