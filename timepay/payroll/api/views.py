import logging

from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import mixins
from rest_framework import permissions
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from timepay.exceptions import ComputationFailure
from timepay.exceptions import StateError
from timepay.payroll.api.permissions import IsAdminOrPayrollOnly
from timepay.payroll.api.serializers import AllowanceSerializer
from timepay.payroll.api.serializers import PayPeriodSerializer
from timepay.payroll.api.serializers import PayProfileSerializer
from timepay.payroll.api.serializers import PayrollAdjustmentSerializer
from timepay.payroll.api.serializers import PayrollRunSerializer
from timepay.payroll.api.serializers import PayslipSerializer
from timepay.payroll.api.serializers import RunCancelSerializer
from timepay.payroll.api.serializers import RunComputeSerializer
from timepay.payroll.models import Allowance
from timepay.payroll.models import PayPeriod
from timepay.payroll.models import PayProfile
from timepay.payroll.models import PayrollAdjustment
from timepay.payroll.models import PayrollRun
from timepay.payroll.models import Payslip
from timepay.payroll.services import approve_payroll_run
from timepay.payroll.services import cancel_payroll_run
from timepay.payroll.services import compute_payroll_run
from timepay.payroll.services import create_payroll_run
from timepay.payroll.services import ensure_run_editable
from timepay.payroll.services import release_payroll_run
from timepay.payroll.tasks import compute_run_task

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(tags=["Payroll • Pay Profiles"]),
    retrieve=extend_schema(tags=["Payroll • Pay Profiles"]),
    create=extend_schema(tags=["Payroll • Pay Profiles"]),
    update=extend_schema(tags=["Payroll • Pay Profiles"]),
    partial_update=extend_schema(tags=["Payroll • Pay Profiles"]),
    destroy=extend_schema(tags=["Payroll • Pay Profiles"]),
)
class PayProfileViewSet(viewsets.ModelViewSet):
    queryset = PayProfile.objects.select_related("employee")
    serializer_class = PayProfileSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminOrPayrollOnly]
    filterset_fields = ["employee", "wage_type", "pay_frequency"]
    search_fields = ["employee__employee_id", "employee__last_name"]
    ordering = ["employee"]


@extend_schema_view(
    list=extend_schema(tags=["Payroll • Allowances"]),
    retrieve=extend_schema(tags=["Payroll • Allowances"]),
    create=extend_schema(tags=["Payroll • Allowances"]),
    update=extend_schema(tags=["Payroll • Allowances"]),
    partial_update=extend_schema(tags=["Payroll • Allowances"]),
    destroy=extend_schema(tags=["Payroll • Allowances"]),
)
class AllowanceViewSet(viewsets.ModelViewSet):
    queryset = Allowance.objects.select_related("pay_profile__employee")
    serializer_class = AllowanceSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminOrPayrollOnly]
    filterset_fields = ["pay_profile", "is_taxable"]
    search_fields = ["name", "pay_profile__employee__employee_id"]
    ordering = ["pay_profile", "id"]


@extend_schema_view(
    list=extend_schema(tags=["Payroll • Pay Periods"]),
    retrieve=extend_schema(tags=["Payroll • Pay Periods"]),
    create=extend_schema(tags=["Payroll • Pay Periods"]),
    update=extend_schema(tags=["Payroll • Pay Periods"]),
    partial_update=extend_schema(tags=["Payroll • Pay Periods"]),
    destroy=extend_schema(tags=["Payroll • Pay Periods"]),
)
class PayPeriodViewSet(viewsets.ModelViewSet):
    queryset = PayPeriod.objects.all()
    serializer_class = PayPeriodSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminOrPayrollOnly]
    filterset_fields = ["pay_frequency"]
    search_fields = ["code"]
    ordering = ["-start_date"]


def _conflict(exc: Exception) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)


@extend_schema_view(
    list=extend_schema(tags=["Payroll • Runs"]),
    retrieve=extend_schema(tags=["Payroll • Runs"]),
    create=extend_schema(tags=["Payroll • Runs"]),
)
class PayrollRunViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    """Payroll runs; status only moves through the workflow actions."""

    queryset = PayrollRun.objects.select_related(
        "pay_period", "created_by", "approved_by"
    )
    serializer_class = PayrollRunSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminOrPayrollOnly]
    filterset_fields = ["pay_period", "status"]
    search_fields = ["pay_period__code", "remarks"]
    ordering = ["-created_at"]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            run = create_payroll_run(
                data["pay_period"],
                created_by=request.user,
                employees=data.get("employees") or None,
                remarks=data.get("remarks", ""),
            )
        except StateError as exc:
            return _conflict(exc)
        return Response(
            self.get_serializer(run).data, status=status.HTTP_201_CREATED
        )

    def _current(self, run_id) -> Response:
        return Response(self.get_serializer(PayrollRun.objects.get(pk=run_id)).data)

    @extend_schema(tags=["Payroll • Runs"], request=RunComputeSerializer)
    @action(detail=True, methods=["post"])
    def compute(self, request, pk=None):
        run = self.get_object()
        options = RunComputeSerializer(data=request.data)
        options.is_valid(raise_exception=True)
        if options.validated_data["run_async"]:
            result = compute_run_task.delay(run.pk)
            return Response(
                {"detail": "Computation queued", "task_id": result.id},
                status=status.HTTP_202_ACCEPTED,
            )
        try:
            compute_payroll_run(run.pk)
        except StateError as exc:
            return _conflict(exc)
        except ComputationFailure as exc:
            # Returned rather than raised so the DRAFT reset commits.
            return Response(
                {"detail": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        return self._current(run.pk)

    @extend_schema(tags=["Payroll • Runs"], request=None)
    @action(detail=True, methods=["post"])
    def approve(self, request, pk=None):
        run = self.get_object()
        try:
            approve_payroll_run(run.pk, request.user)
        except StateError as exc:
            return _conflict(exc)
        return self._current(run.pk)

    @extend_schema(tags=["Payroll • Runs"], request=None)
    @action(detail=True, methods=["post"])
    def release(self, request, pk=None):
        run = self.get_object()
        try:
            release_payroll_run(run.pk)
        except StateError as exc:
            return _conflict(exc)
        return self._current(run.pk)

    @extend_schema(tags=["Payroll • Runs"], request=RunCancelSerializer)
    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):
        run = self.get_object()
        payload = RunCancelSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        try:
            cancel_payroll_run(run.pk, payload.validated_data["reason"])
        except StateError as exc:
            return _conflict(exc)
        return self._current(run.pk)


@extend_schema_view(
    list=extend_schema(tags=["Payroll • Payslips"]),
    retrieve=extend_schema(tags=["Payroll • Payslips"]),
)
class PayslipViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Payslip.objects.select_related("employee", "run").prefetch_related(
        "lines"
    )
    serializer_class = PayslipSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminOrPayrollOnly]
    filterset_fields = ["run", "employee"]
    search_fields = ["employee__employee_id", "employee__last_name"]
    ordering = ["run", "employee"]


@extend_schema_view(
    list=extend_schema(tags=["Payroll • Adjustments"]),
    retrieve=extend_schema(tags=["Payroll • Adjustments"]),
    create=extend_schema(tags=["Payroll • Adjustments"]),
    update=extend_schema(tags=["Payroll • Adjustments"]),
    partial_update=extend_schema(tags=["Payroll • Adjustments"]),
    destroy=extend_schema(tags=["Payroll • Adjustments"]),
)
class PayrollAdjustmentViewSet(viewsets.ModelViewSet):
    """Manual earnings and deductions; writable while the run is DRAFT or REVIEW."""

    queryset = PayrollAdjustment.objects.select_related("run", "employee")
    serializer_class = PayrollAdjustmentSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminOrPayrollOnly]
    filterset_fields = ["run", "employee", "kind"]
    search_fields = ["description", "employee__employee_id"]
    ordering = ["run", "employee", "id"]

    def _guarded(self, method, *args, **kwargs):
        try:
            return method(*args, **kwargs)
        except StateError as exc:
            return _conflict(exc)

    def create(self, request, *args, **kwargs):
        return self._guarded(super().create, request, *args, **kwargs)

    def update(self, request, *args, **kwargs):
        return self._guarded(super().update, request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        return self._guarded(super().destroy, request, *args, **kwargs)

    def perform_create(self, serializer):
        ensure_run_editable(serializer.validated_data["run"])
        serializer.save(created_by=self.request.user)

    def perform_update(self, serializer):
        ensure_run_editable(serializer.instance.run)
        if "run" in serializer.validated_data:
            ensure_run_editable(serializer.validated_data["run"])
        serializer.save()

    def perform_destroy(self, instance):
        ensure_run_editable(instance.run)
        instance.delete()
