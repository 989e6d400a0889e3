from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _


class LeaveType(models.Model):
    name = models.CharField(
        max_length=100, unique=True, help_text=_("Vacation, Sick, Emergency")
    )
    code = models.CharField(max_length=20, unique=True)
    is_paid = models.BooleanField(default=True, help_text=_("Toggle: Paid / Unpaid"))

    def __str__(self):
        return self.name


class Holiday(models.Model):
    class DayType(models.TextChoices):
        REGULAR = "REGULAR", _("Regular holiday")
        SPECIAL = "SPECIAL", _("Special non-working day")

    date = models.DateField(unique=True)
    name = models.CharField(
        max_length=100, help_text=_("Holiday Name (e.g., Independence Day)")
    )
    day_type = models.CharField(
        max_length=10, choices=DayType.choices, default=DayType.REGULAR
    )

    class Meta:
        ordering = ["date"]

    def __str__(self):
        return f"{self.name} ({self.date})"


class LeaveRequest(models.Model):
    class Status(models.TextChoices):
        PENDING = "PENDING", _("Pending")
        APPROVED = "APPROVED", _("Approved")
        REJECTED = "REJECTED", _("Rejected")

    employee = models.ForeignKey(
        "employees.Employee",
        on_delete=models.CASCADE,
        related_name="leave_requests",
    )
    leave_type = models.ForeignKey(
        LeaveType, on_delete=models.PROTECT, related_name="requests"
    )
    start_date = models.DateField(help_text=_("First day of leave"))
    end_date = models.DateField(help_text=_("Last day of leave (inclusive)"))
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )
    reason = models.TextField(blank=True, default="")

    class Meta:
        ordering = ["-start_date"]

    def __str__(self):
        return f"{self.employee} - {self.leave_type.name} ({self.start_date})"

    def clean(self):
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValidationError({"end_date": _("Start date cannot be after end date.")})
