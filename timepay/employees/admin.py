from django.contrib import admin

from timepay.employees.models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ["id", "employee_id", "first_name", "last_name", "default_shift", "is_active"]
    search_fields = ["employee_id", "first_name", "last_name"]
    list_filter = ["is_active", "default_shift"]
