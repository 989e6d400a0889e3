from django.contrib import admin

from timepay.leaves import models


@admin.register(models.LeaveType)
class LeaveTypeAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "code", "is_paid"]
    search_fields = ["name", "code"]
    list_filter = ["is_paid"]


@admin.register(models.Holiday)
class HolidayAdmin(admin.ModelAdmin):
    list_display = ["id", "date", "name", "day_type"]
    search_fields = ["name"]
    list_filter = ["day_type", "date"]


@admin.register(models.LeaveRequest)
class LeaveRequestAdmin(admin.ModelAdmin):
    list_display = ["id", "employee", "leave_type", "start_date", "end_date", "status"]
    search_fields = ["employee__employee_id", "reason"]
    list_filter = ["status", "leave_type", "start_date"]
