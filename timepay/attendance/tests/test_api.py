import datetime as dt

import pytest
from rest_framework import status
from rest_framework.test import APIClient

from timepay.attendance.models import AttendanceDayRecord
from timepay.shifts.resolver import MANILA
from timepay.users.models import User

MONDAY = dt.date(2026, 3, 2)


@pytest.fixture
def record(employee):
    return AttendanceDayRecord.objects.create(
        employee=employee,
        attendance_date=MONDAY,
        clock_in=dt.datetime(2026, 3, 2, 9, 10, tzinfo=MANILA),
        clock_out=dt.datetime(2026, 3, 2, 18, 0, tzinfo=MANILA),
    )


@pytest.mark.django_db
def test_records_are_filtered_by_employee_and_dates(api_client, record):
    AttendanceDayRecord.objects.create(
        employee=record.employee, attendance_date=MONDAY + dt.timedelta(days=10)
    )

    res = api_client.get(
        "/api/v1/attendance/records/",
        {"employee": record.employee_id, "start_date": "2026-03-01", "end_date": "2026-03-08"},
    )

    assert res.status_code == status.HTTP_200_OK
    assert [row["id"] for row in res.json()] == [record.pk]


@pytest.mark.django_db
def test_patch_approves_overtime(api_client, record):
    res = api_client.patch(
        f"/api/v1/attendance/records/{record.pk}/",
        {"late_in_approved": True, "override_reason": "traffic advisory"},
        format="json",
    )

    assert res.status_code == status.HTTP_200_OK
    record.refresh_from_db()
    assert record.late_in_approved


@pytest.mark.django_db
def test_patch_rejects_reversed_punches(api_client, record):
    res = api_client.patch(
        f"/api/v1/attendance/records/{record.pk}/",
        {"clock_out": "2026-03-02T08:00:00+08:00"},
        format="json",
    )

    assert res.status_code == status.HTTP_400_BAD_REQUEST
    assert "clock_out" in res.json()


@pytest.mark.django_db
def test_locked_record_edit_conflicts(api_client, record):
    AttendanceDayRecord.objects.filter(pk=record.pk).update(is_locked=True)

    res = api_client.patch(
        f"/api/v1/attendance/records/{record.pk}/",
        {"early_in_approved": True},
        format="json",
    )
    deleted = api_client.delete(f"/api/v1/attendance/records/{record.pk}/")

    assert res.status_code == status.HTTP_409_CONFLICT
    assert deleted.status_code == status.HTTP_409_CONFLICT
    record.refresh_from_db()
    assert not record.early_in_approved


@pytest.mark.django_db
def test_reconciled_day(api_client, record):
    res = api_client.get(f"/api/v1/attendance/records/{record.pk}/reconciled/")

    assert res.status_code == status.HTTP_200_OK
    body = res.json()
    assert body["attendance_status"] == "PRESENT"
    assert body["shift_code"] == "DAY"
    assert body["is_rest_day"] is False
    assert body["reconciled"]["late_minutes"] == 10
    assert body["reconciled"]["worked_minutes"] == 470


@pytest.mark.django_db
def test_reconciled_period(api_client, record):
    res = api_client.get(
        "/api/v1/attendance/reconciled/",
        {"employee": record.employee_id, "start_date": "2026-03-02", "end_date": "2026-03-08"},
    )

    assert res.status_code == status.HTTP_200_OK
    body = res.json()
    assert len(body["days"]) == 7
    assert body["summary"]["status_counts"]["PRESENT"] == 1
    assert body["summary"]["status_counts"]["REST_DAY"] == 2
    assert body["summary"]["totals"]["late_minutes"] == 10


@pytest.mark.django_db
def test_reconciled_period_rejects_reversed_range(api_client, employee):
    res = api_client.get(
        "/api/v1/attendance/reconciled/",
        {"employee": employee.pk, "start_date": "2026-03-08", "end_date": "2026-03-02"},
    )

    assert res.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
def test_plain_user_is_forbidden(record):
    user = User.objects.create_user(username="staffer", email="s@example.com", password="x-1")
    client = APIClient()
    client.force_authenticate(user=user)

    res = client.get("/api/v1/attendance/records/")

    assert res.status_code == status.HTTP_403_FORBIDDEN
