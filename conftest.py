import datetime as dt
from decimal import Decimal

import pytest
from django.contrib.auth.models import Group
from rest_framework.test import APIClient

from timepay.employees.models import Employee
from timepay.payroll.models import PayPeriod
from timepay.payroll.models import PayProfile
from timepay.shifts.models import ShiftTemplate
from timepay.users.models import User


@pytest.fixture
def payroll_user(db):
    user = User.objects.create_user(
        username="payroll", email="payroll@example.com", password="not-used-1"
    )
    group, _ = Group.objects.get_or_create(name="Payroll")
    user.groups.add(group)
    return user


@pytest.fixture
def approver(db):
    user = User.objects.create_user(
        username="approver", email="approver@example.com", password="not-used-2"
    )
    group, _ = Group.objects.get_or_create(name="Payroll")
    user.groups.add(group)
    return user


@pytest.fixture
def day_shift(db):
    return ShiftTemplate.objects.create(
        code="DAY",
        name="Day 09:00-18:00",
        start_time=dt.time(9, 0),
        end_time=dt.time(18, 0),
        break_minutes=60,
        break_start_time=dt.time(12, 0),
        break_end_time=dt.time(13, 0),
    )


@pytest.fixture
def employee(day_shift):
    return Employee.objects.create(
        employee_id="EMP-001",
        first_name="Ana",
        last_name="Reyes",
        default_shift=day_shift,
    )


@pytest.fixture
def pay_profile(employee):
    return PayProfile.objects.create(
        employee=employee,
        wage_type="MONTHLY",
        base_rate=Decimal("26000.00"),
        pay_frequency="SEMI_MONTHLY",
    )


@pytest.fixture
def pay_period(db):
    # 2026-03-02 is a Monday.
    return PayPeriod.objects.create(
        code="2026-03-A",
        start_date=dt.date(2026, 3, 2),
        end_date=dt.date(2026, 3, 8),
        pay_frequency="SEMI_MONTHLY",
    )


@pytest.fixture
def api_client(payroll_user):
    client = APIClient()
    client.force_authenticate(user=payroll_user)
    return client
