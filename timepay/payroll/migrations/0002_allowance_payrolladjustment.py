import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


CATEGORIES = [
    ("BASIC_PAY", "Basic pay"),
    ("HOLIDAY_PAY", "Holiday pay"),
    ("OVERTIME_REGULAR", "Overtime"),
    ("OVERTIME_REST_DAY", "Rest day overtime"),
    ("OVERTIME_HOLIDAY", "Holiday overtime"),
    ("NIGHT_DIFFERENTIAL", "Night differential"),
    ("ALLOWANCE", "Allowance"),
    ("ADJUSTMENT_ADD", "Adjustment (earning)"),
    ("LATE_UT_DEDUCTION", "Late/undertime deduction"),
    ("ABSENT_DEDUCTION", "Absent deduction"),
    ("SSS_EE", "SSS contribution"),
    ("PHILHEALTH_EE", "PhilHealth contribution"),
    ("PAGIBIG_EE", "Pag-IBIG contribution"),
    ("TAX_WITHHOLDING", "Withholding tax"),
    ("ADJUSTMENT_DEDUCT", "Adjustment (deduction)"),
]


class Migration(migrations.Migration):

    dependencies = [
        ("employees", "0001_initial"),
        ("payroll", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.AlterField(
            model_name="payslipline",
            name="category",
            field=models.CharField(choices=CATEGORIES, max_length=30),
        ),
        migrations.CreateModel(
            name="Allowance",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("monthly_amount", models.DecimalField(decimal_places=2, max_digits=12)),
                ("is_taxable", models.BooleanField(default=False, help_text="De minimis allowances are excluded from taxable income")),
                ("pay_profile", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="allowances", to="payroll.payprofile")),
            ],
            options={
                "verbose_name": "Allowance",
                "verbose_name_plural": "Allowances",
                "ordering": ["pay_profile_id", "id"],
            },
        ),
        migrations.CreateModel(
            name="PayrollAdjustment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("kind", models.CharField(choices=[("EARNING", "Earning"), ("DEDUCTION", "Deduction")], max_length=10)),
                ("description", models.CharField(max_length=150)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=12)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("employee", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="payroll_adjustments", to="employees.employee")),
                ("run", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="adjustments", to="payroll.payrollrun")),
            ],
            options={
                "verbose_name": "Payroll Adjustment",
                "verbose_name_plural": "Payroll Adjustments",
                "ordering": ["run_id", "employee_id", "id"],
            },
        ),
    ]
