from decimal import Decimal

import pytest

from timepay.payroll.wages import derive_rates
from timepay.payroll.wages import periods_per_month
from timepay.payroll.wages import periods_per_year


def test_monthly_rates():
    rates = derive_rates("MONTHLY", Decimal("26000"))
    assert rates.monthly == Decimal("26000")
    assert rates.daily == Decimal("1000")
    assert rates.hourly == Decimal("125")
    assert rates.minute * 60 == Decimal("125")


def test_daily_rates():
    rates = derive_rates("DAILY", Decimal("800"), days_per_month=22)
    assert rates.daily == Decimal("800")
    assert rates.monthly == Decimal("17600")
    assert rates.hourly == Decimal("100")


def test_hourly_rates():
    rates = derive_rates("HOURLY", Decimal("100"), hours_per_day=10)
    assert rates.daily == Decimal("1000")
    assert rates.hourly == Decimal("100")


def test_zero_standards_fall_back_to_defaults():
    rates = derive_rates("MONTHLY", Decimal("26000"), days_per_month=0, hours_per_day=0)
    assert rates.daily == Decimal("1000")


@pytest.mark.parametrize(
    ("frequency", "per_month", "per_year"),
    [
        ("MONTHLY", Decimal(1), Decimal(12)),
        ("SEMI_MONTHLY", Decimal(2), Decimal(24)),
        ("WEEKLY", Decimal(52) / Decimal(12), Decimal(52)),
    ],
)
def test_period_counts(frequency, per_month, per_year):
    assert periods_per_month(frequency) == per_month
    assert periods_per_year(frequency) == per_year
