from __future__ import annotations

from datetime import date
from datetime import timedelta

from timepay.attendance.classifier import HolidayInfo
from timepay.leaves.models import Holiday
from timepay.leaves.models import LeaveRequest
from timepay.leaves.models import LeaveType


def holidays_between(start: date, end: date) -> dict[date, HolidayInfo]:
    """Calendar holidays in [start, end] keyed by date."""

    return {
        h.date: HolidayInfo(name=h.name, holiday_type=h.day_type)
        for h in Holiday.objects.filter(date__range=(start, end))
    }


def approved_leave_days(
    employee_id: int, start: date, end: date
) -> dict[date, LeaveType]:
    """Leave type for every date in [start, end] covered by approved leave."""

    requests = (
        LeaveRequest.objects.filter(
            employee_id=employee_id,
            status=LeaveRequest.Status.APPROVED,
            start_date__lte=end,
            end_date__gte=start,
        )
        .select_related("leave_type")
        .order_by("start_date", "id")
    )
    days: dict[date, LeaveType] = {}
    for req in requests:
        current = max(req.start_date, start)
        last = min(req.end_date, end)
        while current <= last:
            days.setdefault(current, req.leave_type)
            current += timedelta(days=1)
    return days
