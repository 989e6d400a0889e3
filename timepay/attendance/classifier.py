from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from timepay.attendance.choices import AttendanceStatus
from timepay.attendance.choices import DayType
from timepay.attendance.reconciliation import BREAK_DEDUCTION_THRESHOLD
from timepay.attendance.reconciliation import to_minutes
from timepay.shifts.resolver import ResolvedSchedule

_HOLIDAY_STATUS = {
    "REGULAR": AttendanceStatus.REGULAR_HOLIDAY,
    "SPECIAL": AttendanceStatus.SPECIAL_HOLIDAY,
}
_HOLIDAY_DAY_TYPE = {
    "REGULAR": DayType.REGULAR_HOLIDAY,
    "SPECIAL": DayType.SPECIAL_HOLIDAY,
}


@dataclass(frozen=True)
class HolidayInfo:
    name: str
    holiday_type: str  # REGULAR or SPECIAL


@dataclass(frozen=True)
class DayClassification:
    attendance_status: str
    day_type: str
    holiday_name: str = ""
    holiday_type: str = ""
    leave_type: str = ""
    # A holiday on a scheduled rest day keeps its holiday day type but pays
    # the combined holiday and rest day premium.
    is_rest_day: bool = False


def raw_worked_minutes(
    clock_in: datetime | None, clock_out: datetime | None, break_minutes: int
) -> int:
    """Punch span minus the break when the span is longer than five hours."""

    if clock_in is None or clock_out is None or clock_out <= clock_in:
        return 0
    worked = to_minutes(clock_out - clock_in)
    if clock_out - clock_in > BREAK_DEDUCTION_THRESHOLD:
        worked -= break_minutes
    return max(0, worked)


def classify_day(
    *,
    clock_in: datetime | None,
    clock_out: datetime | None,
    schedule: ResolvedSchedule,
    holiday: HolidayInfo | None = None,
    leave_type: str | None = None,
    stored_day_type: str | None = None,
    stored_status: str | None = None,
    has_record: bool = True,
    standard_hours_per_day: int = 8,
    break_minutes: int | None = None,
) -> DayClassification:
    """Decide a day's attendance status and pay day type.

    The first matching rule wins:
    1. any punch -> PRESENT (HALF_DAY when worked <= half the standard day)
    2. approved leave -> ON_LEAVE
    3. calendar holiday -> REGULAR_HOLIDAY / SPECIAL_HOLIDAY
    4. stored REST_DAY day type, or stored ABSENT / ON_LEAVE status
    5. weekly off day with no assigned shift -> REST_DAY
    6. ABSENT when a record exists, NO_DATA otherwise

    Holiday name and type are reported regardless of the status, so a worked
    holiday is both PRESENT and premium-eligible. `is_rest_day` is set for
    rest days and for holidays that fall on one.
    """

    rest_day = stored_day_type == DayType.REST_DAY or schedule.is_rest_day
    if holiday is not None:
        day_type = _HOLIDAY_DAY_TYPE.get(holiday.holiday_type, DayType.REGULAR_HOLIDAY)
    elif rest_day:
        day_type = DayType.REST_DAY
    else:
        day_type = DayType.WORKDAY

    def result(status: str) -> DayClassification:
        return DayClassification(
            attendance_status=status,
            day_type=day_type,
            holiday_name=holiday.name if holiday else "",
            holiday_type=holiday.holiday_type if holiday else "",
            leave_type=leave_type or "",
            is_rest_day=rest_day,
        )

    if clock_in is not None or clock_out is not None:
        brk = schedule.break_minutes if break_minutes is None else break_minutes
        worked = raw_worked_minutes(clock_in, clock_out, brk)
        if 0 < worked <= standard_hours_per_day * 60 / 2:
            return result(AttendanceStatus.HALF_DAY)
        return result(AttendanceStatus.PRESENT)
    if leave_type:
        return result(AttendanceStatus.ON_LEAVE)
    if holiday is not None:
        return result(_HOLIDAY_STATUS.get(holiday.holiday_type, AttendanceStatus.REGULAR_HOLIDAY))
    if stored_day_type == DayType.REST_DAY:
        return result(AttendanceStatus.REST_DAY)
    if stored_status in (AttendanceStatus.ABSENT, AttendanceStatus.ON_LEAVE):
        return result(stored_status)
    if schedule.is_rest_day:
        return result(AttendanceStatus.REST_DAY)
    return result(AttendanceStatus.ABSENT if has_record else AttendanceStatus.NO_DATA)
