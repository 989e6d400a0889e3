from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date
from datetime import timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from django.core.exceptions import ValidationError

from timepay.attendance.choices import PREMIUM_DAY_TYPES
from timepay.attendance.classifier import DayClassification
from timepay.attendance.classifier import HolidayInfo
from timepay.attendance.classifier import classify_day
from timepay.attendance.models import AttendanceDayRecord
from timepay.attendance.reconciliation import ReconciledDay
from timepay.attendance.reconciliation import reconcile_day
from timepay.leaves.selectors import approved_leave_days
from timepay.leaves.selectors import holidays_between
from timepay.policies import PayrollPolicy
from timepay.policies import get_payroll_policy
from timepay.shifts.resolver import ResolvedSchedule
from timepay.shifts.resolver import resolve_schedule

if TYPE_CHECKING:
    from timepay.employees.models import Employee
    from timepay.leaves.models import LeaveType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceDay:
    """Everything known about one employee-date after reconciliation."""

    attendance_date: date
    record_id: int | None
    schedule: ResolvedSchedule
    classification: DayClassification
    reconciled: ReconciledDay
    leave_is_paid: bool = False
    daily_rate_override: Decimal | None = None

    @property
    def day_type(self) -> str:
        return self.classification.day_type

    @property
    def attendance_status(self) -> str:
        return self.classification.attendance_status

    @property
    def is_rest_day(self) -> bool:
        return self.classification.is_rest_day


def validate_record(record: AttendanceDayRecord, schedule: ResolvedSchedule, day_type: str) -> None:
    """Reject malformed punches and punches on an unscheduled working day.

    Raises ValidationError with field-level detail; nothing is reconciled.
    """

    errors: dict[str, list[str]] = {}
    if record.attendance_date is None:
        errors.setdefault("attendance_date", []).append("Attendance date is required.")
    if record.clock_in and record.clock_out and record.clock_out < record.clock_in:
        errors.setdefault("clock_out", []).append("Clock-out cannot be before clock-in.")
    has_punch = record.clock_in is not None or record.clock_out is not None
    if has_punch and day_type not in PREMIUM_DAY_TYPES and not schedule.has_times:
        errors.setdefault("shift_template", []).append(
            "No schedule resolves for this working day; assign a shift."
        )
    if errors:
        raise ValidationError(errors)


def build_attendance_day(
    day: date,
    record: AttendanceDayRecord | None,
    *,
    employee: Employee,
    policy: PayrollPolicy,
    holiday: HolidayInfo | None = None,
    leave_type: LeaveType | None = None,
) -> AttendanceDay:
    schedule = resolve_schedule(
        day,
        day_shift=record.shift_template if record else None,
        default_shift=employee.default_shift,
        weekly_off=policy.weekly_off,
    )
    classification = classify_day(
        clock_in=record.clock_in if record else None,
        clock_out=record.clock_out if record else None,
        schedule=schedule,
        holiday=holiday,
        leave_type=leave_type.code if leave_type else None,
        stored_day_type=record.day_type if record else None,
        stored_status=record.attendance_status if record else None,
        has_record=record is not None,
        standard_hours_per_day=policy.standard_hours_per_day,
        break_minutes=record.break_minutes_override if record else None,
    )
    if record is None:
        reconciled = ReconciledDay()
    else:
        validate_record(record, schedule, classification.day_type)
        reconciled = reconcile_day(
            day,
            record.clock_in,
            record.clock_out,
            schedule,
            record.overrides,
            classification.day_type,
            rest_day=classification.is_rest_day,
        )
    return AttendanceDay(
        attendance_date=day,
        record_id=record.pk if record else None,
        schedule=schedule,
        classification=classification,
        reconciled=reconciled,
        leave_is_paid=bool(leave_type and leave_type.is_paid),
        daily_rate_override=record.daily_rate_override if record else None,
    )


def reconcile_record(
    record: AttendanceDayRecord, *, policy: PayrollPolicy | None = None
) -> AttendanceDay:
    """Reconcile a single stored day record."""

    policy = policy or get_payroll_policy()
    day = record.attendance_date
    holiday = holidays_between(day, day).get(day)
    leave = approved_leave_days(record.employee_id, day, day).get(day)
    return build_attendance_day(
        day,
        record,
        employee=record.employee,
        policy=policy,
        holiday=holiday,
        leave_type=leave,
    )


def reconcile_period(
    employee: Employee,
    start: date,
    end: date,
    *,
    policy: PayrollPolicy | None = None,
) -> list[AttendanceDay]:
    """Reconcile every date in [start, end] for one employee, in date order."""

    if end < start:
        raise ValidationError({"end_date": ["End date cannot be before start date."]})
    policy = policy or get_payroll_policy()
    records = {
        r.attendance_date: r
        for r in AttendanceDayRecord.objects.filter(
            employee=employee, attendance_date__range=(start, end)
        ).select_related("shift_template")
    }
    holidays = holidays_between(start, end)
    leaves = approved_leave_days(employee.pk, start, end)

    days = []
    current = start
    while current <= end:
        days.append(
            build_attendance_day(
                current,
                records.get(current),
                employee=employee,
                policy=policy,
                holiday=holidays.get(current),
                leave_type=leaves.get(current),
            )
        )
        current += timedelta(days=1)
    logger.debug(
        "Reconciled %s days for employee %s (%s..%s)", len(days), employee.pk, start, end
    )
    return days


_MINUTE_FIELDS = (
    "worked_minutes",
    "late_minutes",
    "undertime_minutes",
    "ot_early_in_minutes",
    "ot_late_out_minutes",
    "ot_rest_day_minutes",
    "ot_holiday_minutes",
    "ot_break_minutes",
    "night_diff_minutes",
    "early_in_minutes",
    "late_out_minutes",
)


def summarize_period(days: list[AttendanceDay]) -> dict:
    """Day counts per attendance status and minute totals for a period."""

    statuses = Counter(d.attendance_status for d in days)
    totals = {
        name: sum(getattr(d.reconciled, name) for d in days) for name in _MINUTE_FIELDS
    }
    return {"status_counts": dict(sorted(statuses.items())), "totals": totals}
