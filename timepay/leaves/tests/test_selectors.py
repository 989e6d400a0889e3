import datetime as dt

import pytest

from timepay.attendance.classifier import HolidayInfo
from timepay.leaves.models import Holiday
from timepay.leaves.models import LeaveRequest
from timepay.leaves.models import LeaveType
from timepay.leaves.selectors import approved_leave_days
from timepay.leaves.selectors import holidays_between


@pytest.mark.django_db
def test_holidays_between_is_inclusive():
    Holiday.objects.create(date=dt.date(2026, 4, 9), name="Day of Valor", day_type="REGULAR")
    Holiday.objects.create(date=dt.date(2026, 4, 20), name="Outside", day_type="SPECIAL")

    found = holidays_between(dt.date(2026, 4, 1), dt.date(2026, 4, 9))

    assert found == {dt.date(2026, 4, 9): HolidayInfo("Day of Valor", "REGULAR")}


@pytest.mark.django_db
def test_only_approved_leave_days_within_range(employee):
    sick = LeaveType.objects.create(name="Sick", code="SL", is_paid=False)
    LeaveRequest.objects.create(
        employee=employee,
        leave_type=sick,
        start_date=dt.date(2026, 3, 30),
        end_date=dt.date(2026, 4, 2),
        status=LeaveRequest.Status.APPROVED,
    )
    LeaveRequest.objects.create(
        employee=employee,
        leave_type=sick,
        start_date=dt.date(2026, 4, 3),
        end_date=dt.date(2026, 4, 3),
        status=LeaveRequest.Status.PENDING,
    )

    days = approved_leave_days(employee.pk, dt.date(2026, 4, 1), dt.date(2026, 4, 5))

    assert sorted(days) == [dt.date(2026, 4, 1), dt.date(2026, 4, 2)]
    assert days[dt.date(2026, 4, 1)].code == "SL"
