"""
Payroll models.

Pay profiles and pay periods are the inputs; a payroll run owns the payslips
and payslip lines generated for one period and moves through
DRAFT -> COMPUTING -> REVIEW -> APPROVED -> RELEASED.
"""

from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _

from timepay.payroll.choices import AdjustmentKind
from timepay.payroll.choices import LineCategory
from timepay.payroll.choices import PayFrequency
from timepay.payroll.choices import RunStatus
from timepay.payroll.choices import WageType
from timepay.payroll.wages import WageRates
from timepay.payroll.wages import derive_rates


def _money(help_text):
    return models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text=help_text,
    )


class PayProfile(models.Model):
    """How an employee is paid."""

    employee = models.OneToOneField(
        "employees.Employee", on_delete=models.CASCADE, related_name="pay_profile"
    )
    wage_type = models.CharField(
        max_length=10, choices=WageType.choices, default=WageType.MONTHLY
    )
    base_rate = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text=_("Monthly, daily or hourly rate depending on the wage type"),
    )
    pay_frequency = models.CharField(
        max_length=20, choices=PayFrequency.choices, default=PayFrequency.SEMI_MONTHLY
    )
    standard_work_days_per_month = models.PositiveIntegerField(default=26)
    standard_hours_per_day = models.PositiveIntegerField(default=8)
    is_benefits_eligible = models.BooleanField(
        default=True, help_text=_("Deduct SSS, PhilHealth and Pag-IBIG")
    )
    is_ot_eligible = models.BooleanField(default=True, help_text=_("Pay overtime"))
    is_nd_eligible = models.BooleanField(
        default=True, help_text=_("Pay night differential")
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Pay Profile")
        verbose_name_plural = _("Pay Profiles")

    def __str__(self):
        return f"PayProfile: {self.employee} ({self.wage_type} {self.base_rate})"

    @property
    def rates(self) -> WageRates:
        return derive_rates(
            self.wage_type,
            self.base_rate,
            self.standard_work_days_per_month,
            self.standard_hours_per_day,
        )


class Allowance(models.Model):
    """A recurring monthly allowance paid pro rata each period."""

    pay_profile = models.ForeignKey(
        PayProfile, on_delete=models.CASCADE, related_name="allowances"
    )
    name = models.CharField(max_length=100)
    monthly_amount = models.DecimalField(max_digits=12, decimal_places=2)
    is_taxable = models.BooleanField(
        default=False, help_text=_("De minimis allowances are excluded from taxable income")
    )

    class Meta:
        ordering = ["pay_profile_id", "id"]
        verbose_name = _("Allowance")
        verbose_name_plural = _("Allowances")

    def __str__(self):
        return f"{self.name}: {self.monthly_amount}/month"


class PayPeriod(models.Model):
    code = models.CharField(
        max_length=30, unique=True, help_text=_('Period code (e.g., "2026-01-A")')
    )
    start_date = models.DateField(help_text=_("First day of the period"))
    end_date = models.DateField(help_text=_("Last day of the period (inclusive)"))
    pay_date = models.DateField(null=True, blank=True)
    pay_frequency = models.CharField(
        max_length=20, choices=PayFrequency.choices, default=PayFrequency.SEMI_MONTHLY
    )

    class Meta:
        ordering = ["-start_date"]
        verbose_name = _("Pay Period")
        verbose_name_plural = _("Pay Periods")

    def __str__(self):
        return f"{self.code} ({self.start_date} to {self.end_date})"

    def clean(self):
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValidationError({"end_date": _("End date cannot be before start date.")})


class PayrollRun(models.Model):
    pay_period = models.ForeignKey(
        PayPeriod, on_delete=models.PROTECT, related_name="runs"
    )
    status = models.CharField(
        max_length=20,
        choices=RunStatus.choices,
        default=RunStatus.DRAFT,
        db_index=True,
    )
    employees = models.ManyToManyField(
        "employees.Employee",
        blank=True,
        related_name="payroll_runs",
        help_text=_("Restrict the run to these employees; empty means all with a pay profile"),
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_payroll_runs",
    )
    approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="approved_payroll_runs",
    )
    approved_at = models.DateTimeField(null=True, blank=True)
    released_at = models.DateTimeField(null=True, blank=True)
    remarks = models.TextField(blank=True, default="")

    employee_count = models.PositiveIntegerField(default=0)
    total_gross_pay = _money(_("Sum of payslip gross pay"))
    total_deductions = _money(_("Sum of payslip deductions"))
    total_net_pay = _money(_("Sum of payslip net pay"))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name = _("Payroll Run")
        verbose_name_plural = _("Payroll Runs")

    def __str__(self):
        return f"PayrollRun {self.pk} {self.pay_period.code} [{self.status}]"


class Payslip(models.Model):
    """One employee's pay for a run; amounts are rounded to centavos."""

    run = models.ForeignKey(PayrollRun, on_delete=models.CASCADE, related_name="payslips")
    employee = models.ForeignKey(
        "employees.Employee", on_delete=models.PROTECT, related_name="payslips"
    )
    work_days = models.DecimalField(max_digits=6, decimal_places=2, default=Decimal("0.00"))
    basic_pay = _money(_("Basic pay for the period"))
    gross_pay = _money(_("Total earnings"))
    total_deductions = _money(_("Total deductions"))
    net_pay = _money(_("Net pay (gross - deductions)"))
    taxable_income = _money(_("Income subject to withholding tax"))
    withholding_tax = _money(_("Withholding tax"))
    sss_ee = _money(_("SSS employee share"))
    sss_er = _money(_("SSS employer share"))
    philhealth_ee = _money(_("PhilHealth employee share"))
    philhealth_er = _money(_("PhilHealth employer share"))
    pagibig_ee = _money(_("Pag-IBIG employee share"))
    pagibig_er = _money(_("Pag-IBIG employer share"))
    pay_profile_snapshot = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["run_id", "employee_id"]
        constraints = [
            models.UniqueConstraint(fields=["run", "employee"], name="unique_run_employee"),
        ]
        verbose_name = _("Payslip")
        verbose_name_plural = _("Payslips")

    def __str__(self):
        return f"Payslip {self.employee} run={self.run_id}"


class PayslipLine(models.Model):
    payslip = models.ForeignKey(Payslip, on_delete=models.CASCADE, related_name="lines")
    category = models.CharField(max_length=30, choices=LineCategory.choices)
    description = models.CharField(max_length=150)
    quantity = models.DecimalField(max_digits=12, decimal_places=4)
    rate = models.DecimalField(max_digits=16, decimal_places=6)
    multiplier = models.DecimalField(max_digits=6, decimal_places=4, default=Decimal("1"))
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    sort_order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["sort_order", "id"]
        verbose_name = _("Payslip Line")
        verbose_name_plural = _("Payslip Lines")

    def __str__(self):
        return f"{self.category}: {self.amount}"


class PayrollAdjustment(models.Model):
    """A one-off earning or deduction for one employee in one run.

    Adjustments are picked up by the next compute; a run that is already in
    REVIEW has to be recomputed to reflect them.
    """

    run = models.ForeignKey(PayrollRun, on_delete=models.CASCADE, related_name="adjustments")
    employee = models.ForeignKey(
        "employees.Employee", on_delete=models.PROTECT, related_name="payroll_adjustments"
    )
    kind = models.CharField(max_length=10, choices=AdjustmentKind.choices)
    description = models.CharField(max_length=150)
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["run_id", "employee_id", "id"]
        verbose_name = _("Payroll Adjustment")
        verbose_name_plural = _("Payroll Adjustments")

    def __str__(self):
        return f"{self.kind} {self.amount} for {self.employee} run={self.run_id}"
