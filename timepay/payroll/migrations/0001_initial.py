import decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


def money(help_text):
    return models.DecimalField(decimal_places=2, default=decimal.Decimal("0.00"), help_text=help_text, max_digits=12)


FREQUENCIES = [("MONTHLY", "Monthly"), ("SEMI_MONTHLY", "Semi-monthly"), ("BI_WEEKLY", "Bi-weekly"), ("WEEKLY", "Weekly")]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("employees", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="PayPeriod",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(help_text='Period code (e.g., "2026-01-A")', max_length=30, unique=True)),
                ("start_date", models.DateField(help_text="First day of the period")),
                ("end_date", models.DateField(help_text="Last day of the period (inclusive)")),
                ("pay_date", models.DateField(blank=True, null=True)),
                ("pay_frequency", models.CharField(choices=FREQUENCIES, default="SEMI_MONTHLY", max_length=20)),
            ],
            options={
                "verbose_name": "Pay Period",
                "verbose_name_plural": "Pay Periods",
                "ordering": ["-start_date"],
            },
        ),
        migrations.CreateModel(
            name="PayProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("wage_type", models.CharField(choices=[("MONTHLY", "Monthly"), ("DAILY", "Daily"), ("HOURLY", "Hourly")], default="MONTHLY", max_length=10)),
                ("base_rate", models.DecimalField(decimal_places=2, help_text="Monthly, daily or hourly rate depending on the wage type", max_digits=12)),
                ("pay_frequency", models.CharField(choices=FREQUENCIES, default="SEMI_MONTHLY", max_length=20)),
                ("standard_work_days_per_month", models.PositiveIntegerField(default=26)),
                ("standard_hours_per_day", models.PositiveIntegerField(default=8)),
                ("is_benefits_eligible", models.BooleanField(default=True, help_text="Deduct SSS, PhilHealth and Pag-IBIG")),
                ("is_ot_eligible", models.BooleanField(default=True, help_text="Pay overtime")),
                ("is_nd_eligible", models.BooleanField(default=True, help_text="Pay night differential")),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("employee", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="pay_profile", to="employees.employee")),
            ],
            options={
                "verbose_name": "Pay Profile",
                "verbose_name_plural": "Pay Profiles",
            },
        ),
        migrations.CreateModel(
            name="PayrollRun",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(choices=[("DRAFT", "Draft"), ("COMPUTING", "Computing"), ("REVIEW", "Review"), ("APPROVED", "Approved"), ("RELEASED", "Released"), ("CANCELLED", "Cancelled")], db_index=True, default="DRAFT", max_length=20)),
                ("approved_at", models.DateTimeField(blank=True, null=True)),
                ("released_at", models.DateTimeField(blank=True, null=True)),
                ("remarks", models.TextField(blank=True, default="")),
                ("employee_count", models.PositiveIntegerField(default=0)),
                ("total_gross_pay", money("Sum of payslip gross pay")),
                ("total_deductions", money("Sum of payslip deductions")),
                ("total_net_pay", money("Sum of payslip net pay")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("approved_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="approved_payroll_runs", to=settings.AUTH_USER_MODEL)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="created_payroll_runs", to=settings.AUTH_USER_MODEL)),
                ("employees", models.ManyToManyField(blank=True, help_text="Restrict the run to these employees; empty means all with a pay profile", related_name="payroll_runs", to="employees.employee")),
                ("pay_period", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="runs", to="payroll.payperiod")),
            ],
            options={
                "verbose_name": "Payroll Run",
                "verbose_name_plural": "Payroll Runs",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Payslip",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("work_days", models.DecimalField(decimal_places=2, default=decimal.Decimal("0.00"), max_digits=6)),
                ("basic_pay", money("Basic pay for the period")),
                ("gross_pay", money("Total earnings")),
                ("total_deductions", money("Total deductions")),
                ("net_pay", money("Net pay (gross - deductions)")),
                ("taxable_income", money("Income subject to withholding tax")),
                ("withholding_tax", money("Withholding tax")),
                ("sss_ee", money("SSS employee share")),
                ("sss_er", money("SSS employer share")),
                ("philhealth_ee", money("PhilHealth employee share")),
                ("philhealth_er", money("PhilHealth employer share")),
                ("pagibig_ee", money("Pag-IBIG employee share")),
                ("pagibig_er", money("Pag-IBIG employer share")),
                ("pay_profile_snapshot", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("employee", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="payslips", to="employees.employee")),
                ("run", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="payslips", to="payroll.payrollrun")),
            ],
            options={
                "verbose_name": "Payslip",
                "verbose_name_plural": "Payslips",
                "ordering": ["run_id", "employee_id"],
                "constraints": [models.UniqueConstraint(fields=("run", "employee"), name="unique_run_employee")],
            },
        ),
        migrations.CreateModel(
            name="PayslipLine",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("category", models.CharField(choices=[("BASIC_PAY", "Basic pay"), ("HOLIDAY_PAY", "Holiday pay"), ("OVERTIME_REGULAR", "Overtime"), ("OVERTIME_REST_DAY", "Rest day overtime"), ("OVERTIME_HOLIDAY", "Holiday overtime"), ("NIGHT_DIFFERENTIAL", "Night differential"), ("LATE_UT_DEDUCTION", "Late/undertime deduction"), ("ABSENT_DEDUCTION", "Absent deduction"), ("SSS_EE", "SSS contribution"), ("PHILHEALTH_EE", "PhilHealth contribution"), ("PAGIBIG_EE", "Pag-IBIG contribution"), ("TAX_WITHHOLDING", "Withholding tax")], max_length=30)),
                ("description", models.CharField(max_length=150)),
                ("quantity", models.DecimalField(decimal_places=4, max_digits=12)),
                ("rate", models.DecimalField(decimal_places=6, max_digits=16)),
                ("multiplier", models.DecimalField(decimal_places=4, default=decimal.Decimal("1"), max_digits=6)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=12)),
                ("sort_order", models.PositiveIntegerField(default=0)),
                ("payslip", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="lines", to="payroll.payslip")),
            ],
            options={
                "verbose_name": "Payslip Line",
                "verbose_name_plural": "Payslip Lines",
                "ordering": ["sort_order", "id"],
            },
        ),
    ]
