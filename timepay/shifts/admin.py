from django.contrib import admin

from timepay.shifts.models import ShiftTemplate


@admin.register(ShiftTemplate)
class ShiftTemplateAdmin(admin.ModelAdmin):
    list_display = [
        "code",
        "name",
        "start_time",
        "end_time",
        "break_minutes",
        "is_overnight",
        "is_active",
    ]
    search_fields = ["code", "name"]
    list_filter = ["is_overnight", "is_active"]
