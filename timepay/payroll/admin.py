from django.contrib import admin

from timepay.payroll import models


class AllowanceInline(admin.TabularInline):
    model = models.Allowance
    extra = 0


@admin.register(models.PayProfile)
class PayProfileAdmin(admin.ModelAdmin):
    list_display = ["id", "employee", "wage_type", "base_rate", "pay_frequency"]
    search_fields = ["employee__employee_id", "employee__last_name"]
    list_filter = ["wage_type", "pay_frequency", "is_benefits_eligible"]
    inlines = [AllowanceInline]


@admin.register(models.PayPeriod)
class PayPeriodAdmin(admin.ModelAdmin):
    list_display = ["id", "code", "start_date", "end_date", "pay_date", "pay_frequency"]
    search_fields = ["code"]
    list_filter = ["pay_frequency", "start_date"]


class PayslipLineInline(admin.TabularInline):
    model = models.PayslipLine
    extra = 0
    readonly_fields = [
        "category",
        "description",
        "quantity",
        "rate",
        "multiplier",
        "amount",
        "sort_order",
    ]


@admin.register(models.PayrollRun)
class PayrollRunAdmin(admin.ModelAdmin):
    list_display = [
        "id",
        "pay_period",
        "status",
        "employee_count",
        "total_net_pay",
        "created_by",
        "approved_by",
    ]
    list_filter = ["status", "created_at"]
    # Status only changes through the payroll services.
    readonly_fields = ["status", "approved_by", "approved_at", "released_at"]


@admin.register(models.Payslip)
class PayslipAdmin(admin.ModelAdmin):
    list_display = ["id", "run", "employee", "gross_pay", "total_deductions", "net_pay"]
    search_fields = ["employee__employee_id", "employee__last_name"]
    list_filter = ["run__status"]
    inlines = [PayslipLineInline]


@admin.register(models.PayrollAdjustment)
class PayrollAdjustmentAdmin(admin.ModelAdmin):
    list_display = ["id", "run", "employee", "kind", "description", "amount"]
    search_fields = ["description", "employee__employee_id"]
    list_filter = ["kind", "run__status"]
    readonly_fields = ["created_by", "created_at"]
