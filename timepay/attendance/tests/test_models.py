import datetime as dt

import pytest
from django.utils import timezone

from timepay.attendance.models import AttendanceDayRecord
from timepay.exceptions import LockConflict


@pytest.mark.django_db
def test_locked_record_rejects_save_and_delete(employee):
    record = AttendanceDayRecord.objects.create(
        employee=employee, attendance_date=dt.date(2026, 3, 2)
    )
    AttendanceDayRecord.objects.filter(pk=record.pk).update(is_locked=True)

    record.override_reason = "late edit"
    with pytest.raises(LockConflict):
        record.save()
    with pytest.raises(LockConflict):
        record.delete()

    record.refresh_from_db()
    assert record.override_reason == ""


@pytest.mark.django_db
def test_unlocked_record_can_be_edited(employee):
    record = AttendanceDayRecord.objects.create(
        employee=employee, attendance_date=dt.date(2026, 3, 2)
    )
    record.early_in_approved = True
    record.save()

    record.refresh_from_db()
    assert record.overrides.early_in_approved is True


@pytest.mark.django_db
def test_save_never_writes_lock_fields(employee):
    record = AttendanceDayRecord.objects.create(
        employee=employee, attendance_date=dt.date(2026, 3, 2)
    )
    record.is_locked = True
    record.override_reason = "corrected punch"
    record.save()

    record.refresh_from_db()
    assert record.override_reason == "corrected punch"
    assert record.is_locked is False


@pytest.mark.django_db
def test_stale_copy_cannot_unlock_a_locked_day(employee):
    record = AttendanceDayRecord.objects.create(
        employee=employee, attendance_date=dt.date(2026, 3, 2)
    )
    stale = AttendanceDayRecord.objects.get(pk=record.pk)
    AttendanceDayRecord.objects.filter(pk=record.pk).update(
        is_locked=True, locked_at=timezone.now()
    )

    stale.clock_in = None
    with pytest.raises(LockConflict):
        stale.save()

    record.refresh_from_db()
    assert record.is_locked is True
    assert record.locked_at is not None
