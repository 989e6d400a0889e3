"""Payslip computation for one employee over one pay period.

`compute_payslip` is pure: it works from reconciled attendance days, the pay
profile terms and an injected `PayrollPolicy`, and rounds nothing. Rounding to
centavos happens when the result is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from decimal import Decimal
from typing import TYPE_CHECKING

from timepay.attendance.choices import AttendanceStatus
from timepay.attendance.choices import DayType
from timepay.payroll.choices import AdjustmentKind
from timepay.payroll.choices import EARNING_CATEGORIES
from timepay.payroll.choices import SORT_ORDER
from timepay.payroll.choices import LineCategory
from timepay.payroll.choices import WageType
from timepay.payroll.statutory import NO_CONTRIBUTIONS
from timepay.payroll.statutory import Contributions
from timepay.payroll.statutory import compute_contributions
from timepay.payroll.statutory import withholding_tax
from timepay.payroll.wages import WageRates
from timepay.payroll.wages import derive_rates
from timepay.payroll.wages import periods_per_month
from timepay.payroll.wages import periods_per_year
from timepay.payroll.wages import rates_from_daily

if TYPE_CHECKING:
    from collections.abc import Iterable
    from collections.abc import Sequence

    from timepay.attendance.services import AttendanceDay
    from timepay.payroll.models import PayProfile
    from timepay.policies import PayrollPolicy

ZERO = Decimal(0)
ONE = Decimal(1)
DEDUCTION_CATEGORIES = frozenset(set(LineCategory) - EARNING_CATEGORIES)
ATTENDANCE_DEDUCTIONS = frozenset(
    {LineCategory.LATE_UT_DEDUCTION, LineCategory.ABSENT_DEDUCTION}
)


@dataclass(frozen=True)
class AllowanceTerm:
    name: str
    monthly_amount: Decimal
    is_taxable: bool = False


@dataclass(frozen=True)
class Adjustment:
    """A manual earning or deduction entered against a run."""

    kind: str
    description: str
    amount: Decimal

    @property
    def category(self) -> str:
        if self.kind == AdjustmentKind.EARNING:
            return LineCategory.ADJUSTMENT_ADD
        return LineCategory.ADJUSTMENT_DEDUCT


@dataclass(frozen=True)
class ProfileTerms:
    wage_type: str
    base_rate: Decimal
    pay_frequency: str
    standard_work_days_per_month: int = 26
    standard_hours_per_day: int = 8
    is_benefits_eligible: bool = True
    is_ot_eligible: bool = True
    is_nd_eligible: bool = True
    allowances: tuple[AllowanceTerm, ...] = ()

    @classmethod
    def from_profile(cls, profile: PayProfile) -> ProfileTerms:
        return cls(
            wage_type=profile.wage_type,
            base_rate=Decimal(profile.base_rate),
            pay_frequency=profile.pay_frequency,
            standard_work_days_per_month=profile.standard_work_days_per_month,
            standard_hours_per_day=profile.standard_hours_per_day,
            is_benefits_eligible=profile.is_benefits_eligible,
            is_ot_eligible=profile.is_ot_eligible,
            is_nd_eligible=profile.is_nd_eligible,
            allowances=tuple(
                AllowanceTerm(a.name, Decimal(a.monthly_amount), a.is_taxable)
                for a in profile.allowances.all()
            ),
        )

    def snapshot(self) -> dict:
        return {
            "wage_type": self.wage_type,
            "base_rate": str(self.base_rate),
            "pay_frequency": self.pay_frequency,
            "standard_work_days_per_month": self.standard_work_days_per_month,
            "standard_hours_per_day": self.standard_hours_per_day,
            "is_benefits_eligible": self.is_benefits_eligible,
            "is_ot_eligible": self.is_ot_eligible,
            "is_nd_eligible": self.is_nd_eligible,
            "allowances": [
                {
                    "name": a.name,
                    "monthly_amount": str(a.monthly_amount),
                    "is_taxable": a.is_taxable,
                }
                for a in self.allowances
            ],
        }


@dataclass(frozen=True)
class LineItem:
    category: str
    description: str
    quantity: Decimal
    rate: Decimal
    multiplier: Decimal
    amount: Decimal
    sort_order: int

    @property
    def is_deduction(self) -> bool:
        return self.category in DEDUCTION_CATEGORIES


@dataclass(frozen=True)
class PayslipComputation:
    lines: tuple[LineItem, ...]
    work_days: Decimal
    rates: WageRates
    contributions: Contributions
    taxable_income: Decimal
    withholding_tax: Decimal

    def total(self, categories) -> Decimal:
        return sum((ln.amount for ln in self.lines if ln.category in categories), ZERO)

    @property
    def basic_pay(self) -> Decimal:
        return self.total({LineCategory.BASIC_PAY})

    @property
    def gross_pay(self) -> Decimal:
        return self.total(EARNING_CATEGORIES)

    @property
    def total_deductions(self) -> Decimal:
        return self.total(DEDUCTION_CATEGORIES)

    @property
    def net_pay(self) -> Decimal:
        return self.gross_pay - self.total_deductions


@dataclass
class _LineBuilder:
    """Accumulates quantities per (category, rate, multiplier) in first-seen order."""

    groups: dict[tuple, Decimal] = field(default_factory=dict)

    def add(
        self,
        category: str,
        description: str,
        quantity: Decimal,
        rate: Decimal,
        multiplier: Decimal = ONE,
    ) -> None:
        if quantity <= 0 or rate <= 0:
            return
        key = (category, description, rate, multiplier)
        self.groups[key] = self.groups.get(key, ZERO) + quantity

    def build(self) -> list[LineItem]:
        lines = [
            LineItem(
                category=category,
                description=description,
                quantity=quantity,
                rate=rate,
                multiplier=multiplier,
                amount=quantity * rate * multiplier,
                sort_order=SORT_ORDER[category],
            )
            for (category, description, rate, multiplier), quantity in self.groups.items()
        ]
        # sorted() is stable, so equal sort orders keep first-seen order.
        return sorted(lines, key=lambda ln: ln.sort_order)


def _day_rates(day: AttendanceDay, base: WageRates, terms: ProfileTerms) -> WageRates:
    if day.daily_rate_override is None:
        return base
    return rates_from_daily(
        day.daily_rate_override,
        terms.standard_work_days_per_month,
        terms.standard_hours_per_day,
    )


def _is_work_day(day: AttendanceDay) -> bool:
    if day.day_type == DayType.WORKDAY and day.reconciled.worked_minutes > 0:
        return True
    return day.attendance_status == AttendanceStatus.ON_LEAVE and day.leave_is_paid


def _is_unpaid_day(day: AttendanceDay) -> bool:
    """A scheduled workday with nothing worked and no paid leave to cover it."""

    if day.day_type != DayType.WORKDAY:
        return False
    if day.attendance_status == AttendanceStatus.ABSENT:
        return True
    return day.attendance_status == AttendanceStatus.ON_LEAVE and not day.leave_is_paid


def _holiday_multiplier(day: AttendanceDay, policy: PayrollPolicy) -> Decimal:
    if day.day_type == DayType.REGULAR_HOLIDAY:
        if day.is_rest_day:
            return policy.ot_regular_holiday_rest_day_multiplier
        return policy.ot_regular_holiday_multiplier
    if day.is_rest_day:
        return policy.ot_special_holiday_rest_day_multiplier
    return policy.ot_special_holiday_multiplier


_HOLIDAY_OT_LABELS = {
    (DayType.REGULAR_HOLIDAY, False): "Regular holiday overtime (minutes)",
    (DayType.REGULAR_HOLIDAY, True): "Regular holiday on rest day overtime (minutes)",
    (DayType.SPECIAL_HOLIDAY, False): "Special holiday overtime (minutes)",
    (DayType.SPECIAL_HOLIDAY, True): "Special holiday on rest day overtime (minutes)",
}


def compute_payslip(
    terms: ProfileTerms,
    days: Sequence[AttendanceDay],
    policy: PayrollPolicy,
    adjustments: Iterable[Adjustment] = (),
) -> PayslipComputation:
    """Compute one employee's payslip lines for a period.

    Earnings:
    - basic pay: MONTHLY is the monthly rate split per period; DAILY and
      HOURLY are paid per work day at that day's daily rate
    - unworked regular holidays are paid for DAILY and HOURLY employees
    - overtime by category at the policy multipliers, when OT-eligible; a
      holiday on a rest day uses the combined multiplier
    - night differential, when ND-eligible
    - recurring allowances split per period, and manual earning adjustments

    Deductions:
    - late/undertime at the day's minute rate
    - absences and unpaid leave on workdays (MONTHLY only)
    - statutory employee shares, when benefits-eligible
    - withholding tax on gross less the above and non-taxable allowances
    - manual deduction adjustments, after tax
    """

    base = derive_rates(
        terms.wage_type,
        terms.base_rate,
        terms.standard_work_days_per_month,
        terms.standard_hours_per_day,
    )
    per_month = periods_per_month(terms.pay_frequency)
    builder = _LineBuilder()
    work_days = ZERO
    monthly = terms.wage_type == WageType.MONTHLY

    if monthly:
        builder.add(LineCategory.BASIC_PAY, "Basic pay", ONE, base.monthly / per_month)

    for day in days:
        rates = _day_rates(day, base, terms)
        rec = day.reconciled

        if _is_work_day(day):
            work_days += ONE
            if not monthly:
                builder.add(LineCategory.BASIC_PAY, "Basic pay (days)", ONE, rates.daily)

        if (
            not monthly
            and day.day_type == DayType.REGULAR_HOLIDAY
            and rec.worked_minutes == 0
        ):
            builder.add(
                LineCategory.HOLIDAY_PAY,
                "Unworked regular holiday",
                ONE,
                rates.daily,
                policy.unworked_regular_holiday_rate,
            )

        if terms.is_ot_eligible:
            if day.day_type == DayType.WORKDAY:
                regular_ot = (
                    rec.ot_early_in_minutes + rec.ot_late_out_minutes + rec.ot_break_minutes
                )
                builder.add(
                    LineCategory.OVERTIME_REGULAR,
                    "Overtime (minutes)",
                    Decimal(regular_ot),
                    rates.minute,
                    policy.ot_regular_multiplier,
                )
            builder.add(
                LineCategory.OVERTIME_REST_DAY,
                "Rest day overtime (minutes)",
                Decimal(rec.ot_rest_day_minutes),
                rates.minute,
                policy.ot_rest_day_multiplier,
            )
            if day.day_type in (DayType.REGULAR_HOLIDAY, DayType.SPECIAL_HOLIDAY):
                builder.add(
                    LineCategory.OVERTIME_HOLIDAY,
                    _HOLIDAY_OT_LABELS[(day.day_type, day.is_rest_day)],
                    Decimal(rec.ot_holiday_minutes),
                    rates.minute,
                    _holiday_multiplier(day, policy),
                )

        if terms.is_nd_eligible:
            builder.add(
                LineCategory.NIGHT_DIFFERENTIAL,
                "Night differential (minutes)",
                Decimal(rec.night_diff_minutes),
                rates.minute,
                policy.night_diff_rate,
            )

        builder.add(
            LineCategory.LATE_UT_DEDUCTION,
            "Late/undertime (minutes)",
            Decimal(rec.late_minutes + rec.undertime_minutes),
            rates.minute,
        )
        if monthly and _is_unpaid_day(day):
            label = (
                "Unpaid leave (days)"
                if day.attendance_status == AttendanceStatus.ON_LEAVE
                else "Absent (days)"
            )
            builder.add(LineCategory.ABSENT_DEDUCTION, label, ONE, rates.daily)

    non_taxable = ZERO
    for allowance in terms.allowances:
        amount = allowance.monthly_amount / per_month
        builder.add(LineCategory.ALLOWANCE, allowance.name, ONE, amount)
        if not allowance.is_taxable and amount > 0:
            non_taxable += amount

    for adjustment in adjustments:
        builder.add(adjustment.category, adjustment.description, ONE, adjustment.amount)

    lines = builder.build()
    earnings = sum((ln.amount for ln in lines if ln.category in EARNING_CATEGORIES), ZERO)
    attendance_deductions = sum(
        (ln.amount for ln in lines if ln.category in ATTENDANCE_DEDUCTIONS), ZERO
    )

    contributions = NO_CONTRIBUTIONS
    if terms.is_benefits_eligible:
        contributions = compute_contributions(base.monthly, per_month, policy)
        for category, label, share in (
            (LineCategory.SSS_EE, "SSS", contributions.sss.employee),
            (LineCategory.PHILHEALTH_EE, "PhilHealth", contributions.philhealth.employee),
            (LineCategory.PAGIBIG_EE, "Pag-IBIG", contributions.pagibig.employee),
        ):
            if share > 0:
                lines.append(
                    LineItem(category, label, ONE, share, ONE, share, SORT_ORDER[category])
                )

    taxable = max(
        ZERO,
        earnings - attendance_deductions - contributions.employee_total - non_taxable,
    )
    tax = withholding_tax(
        taxable, periods_per_year(terms.pay_frequency), policy.tax_brackets
    )
    if tax > 0:
        lines.append(
            LineItem(
                LineCategory.TAX_WITHHOLDING,
                "Withholding tax",
                ONE,
                tax,
                ONE,
                tax,
                SORT_ORDER[LineCategory.TAX_WITHHOLDING],
            )
        )

    return PayslipComputation(
        lines=tuple(sorted(lines, key=lambda ln: ln.sort_order)),
        work_days=work_days,
        rates=base,
        contributions=contributions,
        taxable_income=taxable,
        withholding_tax=tax,
    )
