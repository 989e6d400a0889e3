"""Typed, immutable views over the policy document.

The payroll engine only ever sees these structures, never the raw document,
so a computation is fully determined by its explicit inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

_DAY_TO_WEEKDAY_INDEX = {
    "Mon": 0,
    "Tue": 1,
    "Wed": 2,
    "Thu": 3,
    "Fri": 4,
    "Sat": 5,
    "Sun": 6,
}
_DEFAULT_WEEKLY_OFF = frozenset({5, 6})


def _dec(value: Any, default: str) -> Decimal:
    if value is None or value == "":
        return Decimal(default)
    return Decimal(str(value))


def parse_weekly_off(value: Any) -> frozenset[int]:
    """Convert ["Sat", "Sun"] style names to weekday indexes (Mon=0 ... Sun=6)."""

    if not isinstance(value, list):
        return _DEFAULT_WEEKLY_OFF
    indexes = {_DAY_TO_WEEKDAY_INDEX[d] for d in value if d in _DAY_TO_WEEKDAY_INDEX}
    return frozenset(indexes)


@dataclass(frozen=True)
class ContributionRule:
    """Employee/employer split of one statutory contribution.

    The monthly salary base is clamped to [salary_floor, salary_cap] before the
    rates apply; a None bound is open.
    """

    employee_rate: Decimal
    employer_rate: Decimal
    salary_floor: Decimal | None = None
    salary_cap: Decimal | None = None

    def salary_base(self, monthly_salary: Decimal) -> Decimal:
        base = monthly_salary
        if self.salary_floor is not None:
            base = max(base, self.salary_floor)
        if self.salary_cap is not None:
            base = min(base, self.salary_cap)
        return base


@dataclass(frozen=True)
class TaxBracket:
    over: Decimal
    rate: Decimal


@dataclass(frozen=True)
class PayrollPolicy:
    ot_regular_multiplier: Decimal = Decimal("1.25")
    ot_rest_day_multiplier: Decimal = Decimal("1.30")
    ot_regular_holiday_multiplier: Decimal = Decimal("2.00")
    ot_special_holiday_multiplier: Decimal = Decimal("1.30")
    ot_regular_holiday_rest_day_multiplier: Decimal = Decimal("2.60")
    ot_special_holiday_rest_day_multiplier: Decimal = Decimal("1.50")
    night_diff_rate: Decimal = Decimal("0.10")
    unworked_regular_holiday_rate: Decimal = Decimal("1.00")
    standard_hours_per_day: int = 8
    standard_work_days_per_month: int = 26
    weekly_off: frozenset[int] = _DEFAULT_WEEKLY_OFF
    sss: ContributionRule = ContributionRule(
        Decimal("0.045"), Decimal("0.095"), salary_cap=Decimal("30000")
    )
    philhealth: ContributionRule = ContributionRule(
        Decimal("0.025"),
        Decimal("0.025"),
        salary_floor=Decimal("10000"),
        salary_cap=Decimal("100000"),
    )
    pagibig: ContributionRule = ContributionRule(
        Decimal("0.02"), Decimal("0.02"), salary_cap=Decimal("10000")
    )
    tax_brackets: tuple[TaxBracket, ...] = (
        TaxBracket(Decimal("0"), Decimal("0")),
        TaxBracket(Decimal("250000"), Decimal("0.15")),
        TaxBracket(Decimal("400000"), Decimal("0.20")),
        TaxBracket(Decimal("800000"), Decimal("0.25")),
        TaxBracket(Decimal("2000000"), Decimal("0.30")),
        TaxBracket(Decimal("8000000"), Decimal("0.35")),
    )

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> PayrollPolicy:
        shift = doc.get("shiftPolicy", {})
        ot = doc.get("overtimePolicy", {})
        nd = doc.get("nightDifferentialPolicy", {})
        holiday = doc.get("holidayPolicy", {})
        statutory = doc.get("statutoryPolicy", {})
        sss = statutory.get("sss", {})
        philhealth = statutory.get("philhealth", {})
        pagibig = statutory.get("pagibig", {})
        brackets = doc.get("taxPolicy", {}).get("brackets") or []

        return cls(
            ot_regular_multiplier=_dec(ot.get("regularRate"), "1.25"),
            ot_rest_day_multiplier=_dec(ot.get("restDayRate"), "1.30"),
            ot_regular_holiday_multiplier=_dec(ot.get("regularHolidayRate"), "2.00"),
            ot_special_holiday_multiplier=_dec(ot.get("specialHolidayRate"), "1.30"),
            ot_regular_holiday_rest_day_multiplier=_dec(
                ot.get("regularHolidayRestDayRate"), "2.60"
            ),
            ot_special_holiday_rest_day_multiplier=_dec(
                ot.get("specialHolidayRestDayRate"), "1.50"
            ),
            night_diff_rate=_dec(nd.get("rate"), "0.10"),
            unworked_regular_holiday_rate=_dec(
                holiday.get("unworkedRegularHolidayRate"), "1.00"
            ),
            standard_hours_per_day=int(shift.get("standardHoursPerDay", 8)),
            standard_work_days_per_month=int(shift.get("standardWorkDaysPerMonth", 26)),
            weekly_off=parse_weekly_off(shift.get("weeklyOff", ["Sat", "Sun"])),
            sss=ContributionRule(
                _dec(sss.get("employeeRate"), "0.045"),
                _dec(sss.get("employerRate"), "0.095"),
                salary_cap=_dec(sss.get("salaryCap"), "30000"),
            ),
            philhealth=ContributionRule(
                _dec(philhealth.get("employeeRate"), "0.025"),
                _dec(philhealth.get("employerRate"), "0.025"),
                salary_floor=_dec(philhealth.get("salaryFloor"), "10000"),
                salary_cap=_dec(philhealth.get("salaryCeiling"), "100000"),
            ),
            pagibig=ContributionRule(
                _dec(pagibig.get("employeeRate"), "0.02"),
                _dec(pagibig.get("employerRate"), "0.02"),
                salary_cap=_dec(pagibig.get("salaryCap"), "10000"),
            ),
            tax_brackets=tuple(
                sorted(
                    (
                        TaxBracket(_dec(b.get("over"), "0"), _dec(b.get("rate"), "0"))
                        for b in brackets
                    ),
                    key=lambda b: b.over,
                )
            )
            or cls.tax_brackets,
        )
