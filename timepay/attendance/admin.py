from django.contrib import admin

from timepay.attendance.models import AttendanceDayRecord


@admin.register(AttendanceDayRecord)
class AttendanceDayRecordAdmin(admin.ModelAdmin):
    list_display = [
        "id",
        "employee",
        "attendance_date",
        "clock_in",
        "clock_out",
        "day_type",
        "attendance_status",
        "is_locked",
    ]
    search_fields = ["employee__employee_id", "employee__last_name"]
    list_filter = ["day_type", "attendance_status", "source_type", "is_locked"]
    readonly_fields = ["is_locked", "locked_by_run", "locked_at"]
