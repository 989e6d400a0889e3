from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ShiftTemplate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(max_length=30, unique=True)),
                ("name", models.CharField(max_length=100)),
                ("start_time", models.TimeField()),
                ("end_time", models.TimeField()),
                ("break_minutes", models.PositiveIntegerField(default=60, help_text="Unpaid break length in minutes")),
                ("break_start_time", models.TimeField(blank=True, help_text="Start of the fixed break window, if the shift has one", null=True)),
                ("break_end_time", models.TimeField(blank=True, null=True)),
                ("grace_minutes_late", models.PositiveIntegerField(default=0, help_text="Minutes after start before lateness counts")),
                ("grace_minutes_early_out", models.PositiveIntegerField(default=0, help_text="Minutes before end before undertime counts")),
                ("is_overnight", models.BooleanField(default=False, help_text="Shift ends on the next calendar day")),
                ("scheduled_work_minutes", models.PositiveIntegerField(blank=True, help_text="Expected paid minutes; derived from the times when empty", null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Shift Template",
                "verbose_name_plural": "Shift Templates",
                "ordering": ["code"],
            },
        ),
    ]
