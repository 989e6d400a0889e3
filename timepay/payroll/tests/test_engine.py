import datetime as dt
from decimal import ROUND_HALF_UP
from decimal import Decimal

from timepay.attendance.choices import AttendanceStatus
from timepay.attendance.choices import DayType
from timepay.attendance.classifier import DayClassification
from timepay.attendance.reconciliation import ReconciledDay
from timepay.attendance.services import AttendanceDay
from timepay.payroll.choices import LineCategory
from timepay.payroll.engine import Adjustment
from timepay.payroll.engine import AllowanceTerm
from timepay.payroll.engine import ProfileTerms
from timepay.payroll.engine import compute_payslip
from timepay.policies import PayrollPolicy
from timepay.shifts.resolver import ResolvedSchedule

POLICY = PayrollPolicy()
START = dt.date(2026, 3, 2)


def cents(value):
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def make_day(
    offset,
    status,
    day_type=DayType.WORKDAY,
    leave_is_paid=False,
    rate=None,
    rest_day=False,
    **minutes,
):
    return AttendanceDay(
        attendance_date=START + dt.timedelta(days=offset),
        record_id=None,
        schedule=ResolvedSchedule(),
        classification=DayClassification(
            attendance_status=status, day_type=day_type, is_rest_day=rest_day
        ),
        reconciled=ReconciledDay(**minutes),
        leave_is_paid=leave_is_paid,
        daily_rate_override=rate,
    )


def monthly_terms(**extra):
    return ProfileTerms(
        wage_type="MONTHLY",
        base_rate=Decimal("26000"),
        pay_frequency="SEMI_MONTHLY",
        **extra,
    )


def test_monthly_payslip_lines_and_totals():
    days = [
        make_day(0, AttendanceStatus.PRESENT, late_minutes=10, worked_minutes=470),
        make_day(1, AttendanceStatus.PRESENT, ot_late_out_minutes=60, worked_minutes=540),
        make_day(2, AttendanceStatus.ABSENT),
        make_day(
            5,
            AttendanceStatus.PRESENT,
            DayType.REST_DAY,
            ot_rest_day_minutes=240,
            worked_minutes=240,
        ),
    ]

    result = compute_payslip(monthly_terms(), days, POLICY)
    amounts = {ln.category: ln.amount for ln in result.lines}

    assert [ln.category for ln in result.lines] == [
        LineCategory.BASIC_PAY,
        LineCategory.OVERTIME_REGULAR,
        LineCategory.OVERTIME_REST_DAY,
        LineCategory.LATE_UT_DEDUCTION,
        LineCategory.ABSENT_DEDUCTION,
        LineCategory.SSS_EE,
        LineCategory.PHILHEALTH_EE,
        LineCategory.PAGIBIG_EE,
        LineCategory.TAX_WITHHOLDING,
    ]
    assert amounts[LineCategory.BASIC_PAY] == Decimal("13000")
    assert cents(amounts[LineCategory.OVERTIME_REGULAR]) == Decimal("156.25")
    assert cents(amounts[LineCategory.OVERTIME_REST_DAY]) == Decimal("650.00")
    assert cents(amounts[LineCategory.LATE_UT_DEDUCTION]) == Decimal("20.83")
    assert amounts[LineCategory.ABSENT_DEDUCTION] == Decimal("1000")
    assert result.work_days == 2
    assert cents(result.gross_pay) == Decimal("13806.25")
    # Taxable: 13806.25 - 1020.83 - 1010 = 11775.42, annualized 282,610.
    assert cents(result.taxable_income) == Decimal("11775.42")
    assert cents(result.withholding_tax) == Decimal("203.81")
    assert cents(result.net_pay) == cents(result.gross_pay - result.total_deductions)


def test_daily_wage_pays_worked_days_leave_and_unworked_holiday():
    terms = ProfileTerms(
        wage_type="DAILY",
        base_rate=Decimal("1000"),
        pay_frequency="WEEKLY",
        is_benefits_eligible=False,
        is_nd_eligible=False,
    )
    days = [
        make_day(0, AttendanceStatus.PRESENT, worked_minutes=480, night_diff_minutes=60),
        make_day(1, AttendanceStatus.PRESENT, worked_minutes=480),
        make_day(2, AttendanceStatus.REGULAR_HOLIDAY, DayType.REGULAR_HOLIDAY),
        make_day(3, AttendanceStatus.ON_LEAVE, leave_is_paid=True),
        make_day(4, AttendanceStatus.ON_LEAVE, leave_is_paid=False),
        make_day(5, AttendanceStatus.ABSENT),
    ]

    result = compute_payslip(terms, days, POLICY)
    by_category = {}
    for line in result.lines:
        by_category.setdefault(line.category, []).append(line)

    assert result.work_days == 3
    (basic,) = by_category[LineCategory.BASIC_PAY]
    assert basic.quantity == 3
    assert basic.amount == Decimal("3000")
    (holiday,) = by_category[LineCategory.HOLIDAY_PAY]
    assert holiday.amount == Decimal("1000")
    assert LineCategory.NIGHT_DIFFERENTIAL not in by_category
    assert LineCategory.ABSENT_DEDUCTION not in by_category
    assert LineCategory.SSS_EE not in by_category
    assert result.gross_pay == Decimal("4000")


def test_daily_rate_override_applies_to_that_day_only():
    terms = ProfileTerms(
        wage_type="DAILY",
        base_rate=Decimal("1000"),
        pay_frequency="WEEKLY",
        is_benefits_eligible=False,
    )
    days = [
        make_day(0, AttendanceStatus.PRESENT, worked_minutes=480),
        make_day(
            1,
            AttendanceStatus.PRESENT,
            rate=Decimal("1600"),
            worked_minutes=480,
            night_diff_minutes=60,
        ),
    ]

    result = compute_payslip(terms, days, POLICY)
    basic = [ln for ln in result.lines if ln.category == LineCategory.BASIC_PAY]
    (night,) = [ln for ln in result.lines if ln.category == LineCategory.NIGHT_DIFFERENTIAL]

    assert [ln.rate for ln in basic] == [Decimal("1000"), Decimal("1600")]
    # 60 minutes at 1600 / 8 / 60 per minute, 10% premium.
    assert cents(night.amount) == Decimal("20.00")


def test_overtime_requires_eligibility():
    days = [
        make_day(0, AttendanceStatus.PRESENT, ot_late_out_minutes=60, worked_minutes=540),
    ]
    result = compute_payslip(monthly_terms(is_ot_eligible=False), days, POLICY)
    assert LineCategory.OVERTIME_REGULAR not in {ln.category for ln in result.lines}


def test_holiday_overtime_uses_holiday_multipliers():
    days = [
        make_day(
            0,
            AttendanceStatus.PRESENT,
            DayType.REGULAR_HOLIDAY,
            ot_holiday_minutes=480,
            worked_minutes=480,
        ),
        make_day(
            1,
            AttendanceStatus.PRESENT,
            DayType.SPECIAL_HOLIDAY,
            ot_holiday_minutes=480,
            worked_minutes=480,
        ),
    ]
    result = compute_payslip(monthly_terms(is_benefits_eligible=False), days, POLICY)
    holiday = [ln for ln in result.lines if ln.category == LineCategory.OVERTIME_HOLIDAY]

    assert [ln.multiplier for ln in holiday] == [Decimal("2.00"), Decimal("1.30")]
    assert cents(holiday[0].amount) == Decimal("2000.00")


def test_injected_policy_changes_multiplier():
    days = [
        make_day(0, AttendanceStatus.PRESENT, ot_late_out_minutes=60, worked_minutes=540),
    ]
    policy = PayrollPolicy(ot_regular_multiplier=Decimal("1.50"))
    result = compute_payslip(monthly_terms(is_benefits_eligible=False), days, policy)
    (ot,) = [ln for ln in result.lines if ln.category == LineCategory.OVERTIME_REGULAR]
    assert cents(ot.amount) == Decimal("187.50")


def test_unpaid_leave_on_a_workday_is_deducted_for_monthly():
    days = [
        make_day(0, AttendanceStatus.PRESENT, worked_minutes=480),
        make_day(1, AttendanceStatus.ON_LEAVE, leave_is_paid=False),
        make_day(2, AttendanceStatus.ON_LEAVE, leave_is_paid=True),
    ]
    result = compute_payslip(monthly_terms(is_benefits_eligible=False), days, POLICY)
    (absent,) = [ln for ln in result.lines if ln.category == LineCategory.ABSENT_DEDUCTION]

    assert absent.description == "Unpaid leave (days)"
    assert absent.amount == Decimal("1000")
    assert result.work_days == 2
    assert result.taxable_income == Decimal("12000")


def test_holiday_on_rest_day_uses_combined_multipliers():
    days = [
        make_day(
            5,
            AttendanceStatus.PRESENT,
            DayType.REGULAR_HOLIDAY,
            rest_day=True,
            ot_holiday_minutes=480,
            worked_minutes=480,
        ),
        make_day(
            6,
            AttendanceStatus.PRESENT,
            DayType.SPECIAL_HOLIDAY,
            rest_day=True,
            ot_holiday_minutes=480,
            worked_minutes=480,
        ),
    ]
    result = compute_payslip(monthly_terms(is_benefits_eligible=False), days, POLICY)
    holiday = [ln for ln in result.lines if ln.category == LineCategory.OVERTIME_HOLIDAY]

    assert [ln.multiplier for ln in holiday] == [Decimal("2.60"), Decimal("1.50")]
    assert cents(holiday[0].amount) == Decimal("2600.00")
    assert cents(holiday[1].amount) == Decimal("1500.00")


def test_allowances_and_manual_adjustments():
    terms = monthly_terms(
        is_benefits_eligible=False,
        allowances=(
            AllowanceTerm("Rice subsidy", Decimal("2000")),
            AllowanceTerm("Transportation", Decimal("1000"), is_taxable=True),
        ),
    )
    adjustments = [
        Adjustment("EARNING", "Retro pay", Decimal("500")),
        Adjustment("DEDUCTION", "Cash advance", Decimal("300")),
    ]

    result = compute_payslip(terms, [], POLICY, adjustments)

    assert [ln.category for ln in result.lines] == [
        LineCategory.BASIC_PAY,
        LineCategory.ALLOWANCE,
        LineCategory.ALLOWANCE,
        LineCategory.ADJUSTMENT_ADD,
        LineCategory.TAX_WITHHOLDING,
        LineCategory.ADJUSTMENT_DEDUCT,
    ]
    assert result.gross_pay == Decimal("15000")
    # The non-taxable rice subsidy stays out of taxable income; the cash
    # advance is taken after tax.
    assert result.taxable_income == Decimal("14000")
    assert cents(result.withholding_tax) == Decimal("537.50")
    assert cents(result.net_pay) == Decimal("14162.50")
