import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import permissions
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.filters import SearchFilter
from rest_framework.response import Response
from rest_framework.views import APIView

from timepay.attendance.api.filters import AttendanceDayRecordFilter
from timepay.attendance.api.serializers import AttendanceDayRecordSerializer
from timepay.attendance.api.serializers import AttendanceDaySerializer
from timepay.attendance.api.serializers import ReconciledPeriodQuerySerializer
from timepay.attendance.models import AttendanceDayRecord
from timepay.attendance.services import reconcile_period
from timepay.attendance.services import reconcile_record
from timepay.attendance.services import summarize_period
from timepay.employees.models import Employee
from timepay.exceptions import LockConflict
from timepay.payroll.api.permissions import IsAdminOrPayrollOnly

logger = logging.getLogger(__name__)


def _validation_payload(exc: DjangoValidationError) -> dict:
    if hasattr(exc, "error_dict"):
        return exc.message_dict
    return {"detail": exc.messages}


def serialize_day(day) -> dict:
    classification = day.classification
    return AttendanceDaySerializer(
        {
            "attendance_date": day.attendance_date,
            "record_id": day.record_id,
            "attendance_status": classification.attendance_status,
            "day_type": classification.day_type,
            "holiday_name": classification.holiday_name or "",
            "holiday_type": classification.holiday_type or "",
            "is_rest_day": classification.is_rest_day,
            "leave_type": classification.leave_type or "",
            "shift_code": day.schedule.shift_code or "",
            "reconciled": day.reconciled.as_dict(),
        }
    ).data


@extend_schema_view(
    list=extend_schema(tags=["Attendance • Day Records"]),
    retrieve=extend_schema(tags=["Attendance • Day Records"]),
    create=extend_schema(tags=["Attendance • Day Records"]),
    update=extend_schema(tags=["Attendance • Day Records"]),
    partial_update=extend_schema(tags=["Attendance • Day Records"]),
    destroy=extend_schema(tags=["Attendance • Day Records"]),
)
class AttendanceDayRecordViewSet(viewsets.ModelViewSet):
    """Raw punches and overrides; writes to locked records return 409."""

    queryset = AttendanceDayRecord.objects.select_related(
        "employee", "shift_template", "locked_by_run"
    )
    serializer_class = AttendanceDayRecordSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminOrPayrollOnly]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_class = AttendanceDayRecordFilter
    search_fields = ["employee__employee_id", "employee__last_name"]
    ordering = ["-attendance_date", "employee"]

    def _guarded(self, method, *args, **kwargs):
        try:
            return method(*args, **kwargs)
        except LockConflict as exc:
            logger.warning("Rejected write to locked attendance: %s", exc)
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

    def create(self, request, *args, **kwargs):
        return self._guarded(super().create, request, *args, **kwargs)

    def update(self, request, *args, **kwargs):
        return self._guarded(super().update, request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        return self._guarded(super().destroy, request, *args, **kwargs)

    @extend_schema(tags=["Attendance • Day Records"], responses=AttendanceDaySerializer)
    @action(detail=True, methods=["get"])
    def reconciled(self, request, pk=None):
        record = self.get_object()
        try:
            day = reconcile_record(record)
        except DjangoValidationError as exc:
            return Response(_validation_payload(exc), status=status.HTTP_400_BAD_REQUEST)
        return Response(serialize_day(day))


class ReconciledPeriodView(APIView):
    """Reconciled days and a summary for one employee over a date range."""

    permission_classes = [permissions.IsAuthenticated, IsAdminOrPayrollOnly]

    @extend_schema(
        tags=["Attendance • Reconciliation"],
        parameters=[
            OpenApiParameter("employee", OpenApiTypes.INT, required=True),
            OpenApiParameter("start_date", OpenApiTypes.DATE, required=True),
            OpenApiParameter("end_date", OpenApiTypes.DATE, required=True),
        ],
        responses=OpenApiTypes.OBJECT,
    )
    def get(self, request):
        query = ReconciledPeriodQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data
        employee = get_object_or_404(
            Employee.objects.select_related("default_shift"), pk=params["employee"]
        )
        try:
            days = reconcile_period(employee, params["start_date"], params["end_date"])
        except DjangoValidationError as exc:
            return Response(_validation_payload(exc), status=status.HTTP_400_BAD_REQUEST)
        return Response(
            {
                "employee": employee.pk,
                "start_date": params["start_date"],
                "end_date": params["end_date"],
                "days": [serialize_day(day) for day in days],
                "summary": summarize_period(days),
            }
        )
