import django_filters

from timepay.attendance.models import AttendanceDayRecord


class AttendanceDayRecordFilter(django_filters.FilterSet):
    employee = django_filters.NumberFilter(field_name="employee__id")
    start_date = django_filters.DateFilter(field_name="attendance_date", lookup_expr="gte")
    end_date = django_filters.DateFilter(field_name="attendance_date", lookup_expr="lte")
    is_locked = django_filters.BooleanFilter()

    class Meta:
        model = AttendanceDayRecord
        fields = ["employee", "start_date", "end_date", "day_type", "is_locked"]
