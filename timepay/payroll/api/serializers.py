from decimal import ROUND_HALF_UP
from decimal import Decimal

from rest_framework import serializers

from timepay.payroll.models import Allowance
from timepay.payroll.models import PayPeriod
from timepay.payroll.models import PayProfile
from timepay.payroll.models import PayrollAdjustment
from timepay.payroll.models import PayrollRun
from timepay.payroll.models import Payslip
from timepay.payroll.models import PayslipLine

_CENTS = Decimal("0.01")


class PayProfileSerializer(serializers.ModelSerializer):
    daily_rate = serializers.SerializerMethodField()
    hourly_rate = serializers.SerializerMethodField()

    class Meta:
        model = PayProfile
        fields = [
            "id",
            "employee",
            "wage_type",
            "base_rate",
            "pay_frequency",
            "standard_work_days_per_month",
            "standard_hours_per_day",
            "is_benefits_eligible",
            "is_ot_eligible",
            "is_nd_eligible",
            "daily_rate",
            "hourly_rate",
            "updated_at",
        ]
        read_only_fields = ["updated_at"]

    def get_daily_rate(self, obj) -> str:
        return str(obj.rates.daily.quantize(_CENTS, rounding=ROUND_HALF_UP))

    def get_hourly_rate(self, obj) -> str:
        return str(obj.rates.hourly.quantize(_CENTS, rounding=ROUND_HALF_UP))

    def validate_base_rate(self, value):
        if value <= 0:
            raise serializers.ValidationError("Base rate must be positive.")
        return value


class AllowanceSerializer(serializers.ModelSerializer):
    class Meta:
        model = Allowance
        fields = ["id", "pay_profile", "name", "monthly_amount", "is_taxable"]

    def validate_monthly_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("Allowance amount must be positive.")
        return value


class PayPeriodSerializer(serializers.ModelSerializer):
    class Meta:
        model = PayPeriod
        fields = ["id", "code", "start_date", "end_date", "pay_date", "pay_frequency"]

    def validate(self, attrs):
        start = attrs.get("start_date", getattr(self.instance, "start_date", None))
        end = attrs.get("end_date", getattr(self.instance, "end_date", None))
        if start and end and start > end:
            raise serializers.ValidationError(
                {"end_date": "End date cannot be before start date."}
            )
        return attrs


class PayslipLineSerializer(serializers.ModelSerializer):
    class Meta:
        model = PayslipLine
        fields = [
            "id",
            "category",
            "description",
            "quantity",
            "rate",
            "multiplier",
            "amount",
            "sort_order",
        ]


class PayslipSerializer(serializers.ModelSerializer):
    lines = PayslipLineSerializer(many=True, read_only=True)
    employee_code = serializers.CharField(source="employee.employee_id", read_only=True)

    class Meta:
        model = Payslip
        fields = [
            "id",
            "run",
            "employee",
            "employee_code",
            "work_days",
            "basic_pay",
            "gross_pay",
            "total_deductions",
            "net_pay",
            "taxable_income",
            "withholding_tax",
            "sss_ee",
            "sss_er",
            "philhealth_ee",
            "philhealth_er",
            "pagibig_ee",
            "pagibig_er",
            "pay_profile_snapshot",
            "lines",
            "created_at",
        ]
        read_only_fields = fields


class PayrollRunSerializer(serializers.ModelSerializer):
    period_code = serializers.CharField(source="pay_period.code", read_only=True)

    class Meta:
        model = PayrollRun
        fields = [
            "id",
            "pay_period",
            "period_code",
            "status",
            "employees",
            "created_by",
            "approved_by",
            "approved_at",
            "released_at",
            "remarks",
            "employee_count",
            "total_gross_pay",
            "total_deductions",
            "total_net_pay",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "status",
            "created_by",
            "approved_by",
            "approved_at",
            "released_at",
            "employee_count",
            "total_gross_pay",
            "total_deductions",
            "total_net_pay",
            "created_at",
            "updated_at",
        ]


class RunCancelSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, default="")


class RunComputeSerializer(serializers.Serializer):
    run_async = serializers.BooleanField(
        required=False,
        default=False,
        help_text="Queue the computation on the worker instead of running it inline",
    )



class PayrollAdjustmentSerializer(serializers.ModelSerializer):
    class Meta:
        model = PayrollAdjustment
        fields = [
            "id",
            "run",
            "employee",
            "kind",
            "description",
            "amount",
            "created_by",
            "created_at",
        ]
        read_only_fields = ["created_by", "created_at"]

    def validate_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError(
                "Amount must be positive; use the kind to deduct."
            )
        return value
