from django.db import models
from django.utils.translation import gettext_lazy as _


class ShiftTemplate(models.Model):
    """A named work schedule.

    Times are Manila wall-clock values without a timezone; they are anchored
    to an attendance date by `timepay.shifts.resolver.anchor`.
    """

    code = models.CharField(max_length=30, unique=True)
    name = models.CharField(max_length=100)
    start_time = models.TimeField()
    end_time = models.TimeField()
    break_minutes = models.PositiveIntegerField(
        default=60, help_text=_("Unpaid break length in minutes")
    )
    break_start_time = models.TimeField(
        null=True,
        blank=True,
        help_text=_("Start of the fixed break window, if the shift has one"),
    )
    break_end_time = models.TimeField(null=True, blank=True)
    grace_minutes_late = models.PositiveIntegerField(
        default=0, help_text=_("Minutes after start before lateness counts")
    )
    grace_minutes_early_out = models.PositiveIntegerField(
        default=0, help_text=_("Minutes before end before undertime counts")
    )
    is_overnight = models.BooleanField(
        default=False, help_text=_("Shift ends on the next calendar day")
    )
    scheduled_work_minutes = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text=_("Expected paid minutes; derived from the times when empty"),
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["code"]
        verbose_name = "Shift Template"
        verbose_name_plural = "Shift Templates"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.code} ({self.start_time:%H:%M}-{self.end_time:%H:%M})"
