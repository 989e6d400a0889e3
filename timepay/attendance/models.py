from django.db import models
from django.db import transaction
from django.utils.translation import gettext_lazy as _

from timepay.attendance.choices import AttendanceStatus
from timepay.attendance.choices import DayType
from timepay.attendance.choices import SourceType
from timepay.attendance.reconciliation import DayOverrides
from timepay.exceptions import LockConflict

LOCK_FIELDS = frozenset({"is_locked", "locked_by_run", "locked_at"})
# Mirrors RunStatus.APPROVED and RunStatus.RELEASED.
LOCKING_RUN_STATUSES = ("APPROVED", "RELEASED")


class AttendanceDayRecord(models.Model):
    """One employee's punches and overrides for one date.

    - Reconciled minutes are never stored; they are derived on read.
    - Once an approved payroll run covers the record it is locked and any
      save or delete raises `LockConflict`. So does creating a record for a
      date an approved or released run has already paid.
    """

    employee = models.ForeignKey(
        "employees.Employee",
        on_delete=models.CASCADE,
        related_name="attendance_records",
    )
    attendance_date = models.DateField()
    clock_in = models.DateTimeField(null=True, blank=True)
    clock_out = models.DateTimeField(null=True, blank=True)
    source_type = models.CharField(
        max_length=16, choices=SourceType.choices, default=SourceType.IMPORT
    )
    shift_template = models.ForeignKey(
        "shifts.ShiftTemplate",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="day_records",
        help_text=_("Shift actually worked that day; beats the default shift"),
    )
    day_type = models.CharField(
        max_length=20, choices=DayType.choices, default=DayType.WORKDAY
    )
    attendance_status = models.CharField(
        max_length=20, choices=AttendanceStatus.choices, blank=True, default=""
    )

    early_in_approved = models.BooleanField(default=False)
    late_out_approved = models.BooleanField(default=False)
    late_in_approved = models.BooleanField(default=False)
    early_out_approved = models.BooleanField(default=False)
    break_minutes_override = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text=_("Empty uses the shift break; 0 means no break was taken"),
    )
    daily_rate_override = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        help_text=_("Replaces the pay profile daily rate for this day only"),
    )
    override_reason = models.CharField(max_length=255, blank=True, default="")

    is_locked = models.BooleanField(default=False)
    locked_by_run = models.ForeignKey(
        "payroll.PayrollRun",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="locked_records",
    )
    locked_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-attendance_date"]
        constraints = [
            models.UniqueConstraint(
                fields=["employee", "attendance_date"],
                name="unique_employee_attendance_date",
            ),
        ]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"AttendanceDayRecord({self.employee_id}@{self.attendance_date})"

    @property
    def overrides(self) -> DayOverrides:
        return DayOverrides(
            early_in_approved=self.early_in_approved,
            late_out_approved=self.late_out_approved,
            late_in_approved=self.late_in_approved,
            early_out_approved=self.early_out_approved,
            break_minutes_override=self.break_minutes_override,
        )

    def _lock_message(self) -> str:
        return (
            f"Attendance for employee {self.employee_id} on "
            f"{self.attendance_date} is locked by an approved payroll run"
        )

    def _paid_by_locked_run(self) -> bool:
        run_model = self._meta.get_field("locked_by_run").related_model
        return run_model.objects.filter(
            status__in=LOCKING_RUN_STATUSES,
            pay_period__start_date__lte=self.attendance_date,
            pay_period__end_date__gte=self.attendance_date,
            payslips__employee_id=self.employee_id,
        ).exists()

    def _ensure_unlocked(self) -> None:
        """Raise LockConflict unless the row may be written.

        Must run inside the write's transaction: the row lock holds off a
        concurrent approval until the write commits.
        """

        if self.pk is None:
            if self._paid_by_locked_run():
                raise LockConflict(self._lock_message())
            return
        locked = (
            type(self)
            .objects.select_for_update()
            .filter(pk=self.pk)
            .values_list("is_locked", flat=True)
            .first()
        )
        if locked:
            raise LockConflict(self._lock_message())

    def save(self, *args, **kwargs):
        with transaction.atomic():
            self._ensure_unlocked()
            if not self._state.adding and kwargs.get("update_fields") is None:
                # Lock fields are only ever written by approval.
                kwargs["update_fields"] = [
                    f.name
                    for f in self._meta.concrete_fields
                    if not f.primary_key and f.name not in LOCK_FIELDS
                ]
            super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        with transaction.atomic():
            self._ensure_unlocked()
            return super().delete(*args, **kwargs)
