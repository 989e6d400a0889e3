from django.db import models
from django.utils.translation import gettext_lazy as _


class WageType(models.TextChoices):
    MONTHLY = "MONTHLY", _("Monthly")
    DAILY = "DAILY", _("Daily")
    HOURLY = "HOURLY", _("Hourly")


class PayFrequency(models.TextChoices):
    MONTHLY = "MONTHLY", _("Monthly")
    SEMI_MONTHLY = "SEMI_MONTHLY", _("Semi-monthly")
    BI_WEEKLY = "BI_WEEKLY", _("Bi-weekly")
    WEEKLY = "WEEKLY", _("Weekly")


class RunStatus(models.TextChoices):
    DRAFT = "DRAFT", _("Draft")
    COMPUTING = "COMPUTING", _("Computing")
    REVIEW = "REVIEW", _("Review")
    APPROVED = "APPROVED", _("Approved")
    RELEASED = "RELEASED", _("Released")
    CANCELLED = "CANCELLED", _("Cancelled")


class AdjustmentKind(models.TextChoices):
    EARNING = "EARNING", _("Earning")
    DEDUCTION = "DEDUCTION", _("Deduction")


class LineCategory(models.TextChoices):
    BASIC_PAY = "BASIC_PAY", _("Basic pay")
    HOLIDAY_PAY = "HOLIDAY_PAY", _("Holiday pay")
    OVERTIME_REGULAR = "OVERTIME_REGULAR", _("Overtime")
    OVERTIME_REST_DAY = "OVERTIME_REST_DAY", _("Rest day overtime")
    OVERTIME_HOLIDAY = "OVERTIME_HOLIDAY", _("Holiday overtime")
    NIGHT_DIFFERENTIAL = "NIGHT_DIFFERENTIAL", _("Night differential")
    ALLOWANCE = "ALLOWANCE", _("Allowance")
    ADJUSTMENT_ADD = "ADJUSTMENT_ADD", _("Adjustment (earning)")
    LATE_UT_DEDUCTION = "LATE_UT_DEDUCTION", _("Late/undertime deduction")
    ABSENT_DEDUCTION = "ABSENT_DEDUCTION", _("Absent deduction")
    SSS_EE = "SSS_EE", _("SSS contribution")
    PHILHEALTH_EE = "PHILHEALTH_EE", _("PhilHealth contribution")
    PAGIBIG_EE = "PAGIBIG_EE", _("Pag-IBIG contribution")
    TAX_WITHHOLDING = "TAX_WITHHOLDING", _("Withholding tax")
    ADJUSTMENT_DEDUCT = "ADJUSTMENT_DEDUCT", _("Adjustment (deduction)")


EARNING_CATEGORIES = frozenset(
    {
        LineCategory.BASIC_PAY,
        LineCategory.HOLIDAY_PAY,
        LineCategory.OVERTIME_REGULAR,
        LineCategory.OVERTIME_REST_DAY,
        LineCategory.OVERTIME_HOLIDAY,
        LineCategory.NIGHT_DIFFERENTIAL,
        LineCategory.ALLOWANCE,
        LineCategory.ADJUSTMENT_ADD,
    }
)

SORT_ORDER = {
    LineCategory.BASIC_PAY: 100,
    LineCategory.HOLIDAY_PAY: 150,
    LineCategory.OVERTIME_REGULAR: 200,
    LineCategory.OVERTIME_REST_DAY: 210,
    LineCategory.OVERTIME_HOLIDAY: 220,
    LineCategory.NIGHT_DIFFERENTIAL: 300,
    LineCategory.ALLOWANCE: 400,
    LineCategory.ADJUSTMENT_ADD: 500,
    LineCategory.LATE_UT_DEDUCTION: 1015,
    LineCategory.ABSENT_DEDUCTION: 1020,
    LineCategory.SSS_EE: 1100,
    LineCategory.PHILHEALTH_EE: 1110,
    LineCategory.PAGIBIG_EE: 1120,
    LineCategory.TAX_WITHHOLDING: 1200,
    LineCategory.ADJUSTMENT_DEDUCT: 1300,
}
