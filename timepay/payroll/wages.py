"""Wage rate derivation.

All figures are exact Decimals; nothing is rounded here.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from timepay.payroll.choices import PayFrequency
from timepay.payroll.choices import WageType

PERIODS_PER_MONTH = {
    PayFrequency.MONTHLY: Decimal(1),
    PayFrequency.SEMI_MONTHLY: Decimal(2),
    PayFrequency.BI_WEEKLY: Decimal(26) / Decimal(12),
    PayFrequency.WEEKLY: Decimal(52) / Decimal(12),
}

PERIODS_PER_YEAR = {
    PayFrequency.MONTHLY: Decimal(12),
    PayFrequency.SEMI_MONTHLY: Decimal(24),
    PayFrequency.BI_WEEKLY: Decimal(26),
    PayFrequency.WEEKLY: Decimal(52),
}


@dataclass(frozen=True)
class WageRates:
    monthly: Decimal
    daily: Decimal
    hourly: Decimal

    @property
    def minute(self) -> Decimal:
        return self.hourly / Decimal(60)


def rates_from_daily(daily: Decimal, days_per_month: int, hours_per_day: int) -> WageRates:
    daily = Decimal(daily)
    return WageRates(
        monthly=daily * Decimal(days_per_month),
        daily=daily,
        hourly=daily / Decimal(hours_per_day),
    )


def derive_rates(
    wage_type: str,
    base_rate: Decimal,
    days_per_month: int = 26,
    hours_per_day: int = 8,
) -> WageRates:
    """Return monthly/daily/hourly rates for a pay profile.

    - MONTHLY: daily = monthly / standard days, hourly = daily / standard hours
    - DAILY: the base rate is the daily rate
    - HOURLY: daily = hourly x standard hours
    """

    base_rate = Decimal(base_rate)
    days_per_month = days_per_month or 26
    hours_per_day = hours_per_day or 8
    if wage_type == WageType.MONTHLY:
        daily = base_rate / Decimal(days_per_month)
        return WageRates(monthly=base_rate, daily=daily, hourly=daily / Decimal(hours_per_day))
    if wage_type == WageType.HOURLY:
        return rates_from_daily(base_rate * Decimal(hours_per_day), days_per_month, hours_per_day)
    return rates_from_daily(base_rate, days_per_month, hours_per_day)


def periods_per_month(pay_frequency: str) -> Decimal:
    return PERIODS_PER_MONTH.get(pay_frequency, Decimal(1))


def periods_per_year(pay_frequency: str) -> Decimal:
    return PERIODS_PER_YEAR.get(pay_frequency, Decimal(12))
