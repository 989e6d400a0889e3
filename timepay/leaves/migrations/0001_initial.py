import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("employees", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Holiday",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField(unique=True)),
                ("name", models.CharField(help_text="Holiday Name (e.g., Independence Day)", max_length=100)),
                ("day_type", models.CharField(choices=[("REGULAR", "Regular holiday"), ("SPECIAL", "Special non-working day")], default="REGULAR", max_length=10)),
            ],
            options={
                "ordering": ["date"],
            },
        ),
        migrations.CreateModel(
            name="LeaveType",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(help_text="Vacation, Sick, Emergency", max_length=100, unique=True)),
                ("code", models.CharField(max_length=20, unique=True)),
                ("is_paid", models.BooleanField(default=True, help_text="Toggle: Paid / Unpaid")),
            ],
        ),
        migrations.CreateModel(
            name="LeaveRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("start_date", models.DateField(help_text="First day of leave")),
                ("end_date", models.DateField(help_text="Last day of leave (inclusive)")),
                ("status", models.CharField(choices=[("PENDING", "Pending"), ("APPROVED", "Approved"), ("REJECTED", "Rejected")], default="PENDING", max_length=20)),
                ("reason", models.TextField(blank=True, default="")),
                ("employee", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="leave_requests", to="employees.employee")),
                ("leave_type", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="requests", to="leaves.leavetype")),
            ],
            options={
                "ordering": ["-start_date"],
            },
        ),
    ]
