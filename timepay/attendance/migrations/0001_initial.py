import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("employees", "0001_initial"),
        ("shifts", "0001_initial"),
        ("payroll", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="AttendanceDayRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("attendance_date", models.DateField()),
                ("clock_in", models.DateTimeField(blank=True, null=True)),
                ("clock_out", models.DateTimeField(blank=True, null=True)),
                ("source_type", models.CharField(choices=[("IMPORT", "Import"), ("MANUAL", "Manual"), ("BIOMETRIC", "Biometric")], default="IMPORT", max_length=16)),
                ("day_type", models.CharField(choices=[("WORKDAY", "Workday"), ("REST_DAY", "Rest day"), ("REGULAR_HOLIDAY", "Regular holiday"), ("SPECIAL_HOLIDAY", "Special holiday")], default="WORKDAY", max_length=20)),
                ("attendance_status", models.CharField(blank=True, choices=[("PRESENT", "Present"), ("HALF_DAY", "Half day"), ("ON_LEAVE", "On leave"), ("REGULAR_HOLIDAY", "Regular holiday"), ("SPECIAL_HOLIDAY", "Special holiday"), ("REST_DAY", "Rest day"), ("ABSENT", "Absent"), ("NO_DATA", "No data")], default="", max_length=20)),
                ("early_in_approved", models.BooleanField(default=False)),
                ("late_out_approved", models.BooleanField(default=False)),
                ("late_in_approved", models.BooleanField(default=False)),
                ("early_out_approved", models.BooleanField(default=False)),
                ("break_minutes_override", models.PositiveIntegerField(blank=True, help_text="Empty uses the shift break; 0 means no break was taken", null=True)),
                ("daily_rate_override", models.DecimalField(blank=True, decimal_places=2, help_text="Replaces the pay profile daily rate for this day only", max_digits=12, null=True)),
                ("override_reason", models.CharField(blank=True, default="", max_length=255)),
                ("is_locked", models.BooleanField(default=False)),
                ("locked_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("employee", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="attendance_records", to="employees.employee")),
                ("locked_by_run", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="locked_records", to="payroll.payrollrun")),
                ("shift_template", models.ForeignKey(blank=True, help_text="Shift actually worked that day; beats the default shift", null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="day_records", to="shifts.shifttemplate")),
            ],
            options={
                "ordering": ["-attendance_date"],
                "constraints": [models.UniqueConstraint(fields=("employee", "attendance_date"), name="unique_employee_attendance_date")],
            },
        ),
    ]
