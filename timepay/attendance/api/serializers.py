from rest_framework import serializers

from timepay.attendance.models import AttendanceDayRecord


class AttendanceDayRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = AttendanceDayRecord
        fields = [
            "id",
            "employee",
            "attendance_date",
            "clock_in",
            "clock_out",
            "source_type",
            "shift_template",
            "day_type",
            "attendance_status",
            "early_in_approved",
            "late_out_approved",
            "late_in_approved",
            "early_out_approved",
            "break_minutes_override",
            "daily_rate_override",
            "override_reason",
            "is_locked",
            "locked_by_run",
            "locked_at",
        ]
        read_only_fields = ["is_locked", "locked_by_run", "locked_at"]

    def validate(self, attrs):
        clock_in = attrs.get("clock_in", getattr(self.instance, "clock_in", None))
        clock_out = attrs.get("clock_out", getattr(self.instance, "clock_out", None))
        if clock_in and clock_out and clock_out < clock_in:
            raise serializers.ValidationError(
                {"clock_out": "Clock-out cannot be before clock-in."}
            )
        return attrs


class ReconciledDaySerializer(serializers.Serializer):
    late_minutes = serializers.IntegerField()
    undertime_minutes = serializers.IntegerField()
    ot_early_in_minutes = serializers.IntegerField()
    ot_late_out_minutes = serializers.IntegerField()
    ot_rest_day_minutes = serializers.IntegerField()
    ot_holiday_minutes = serializers.IntegerField()
    ot_break_minutes = serializers.IntegerField()
    night_diff_minutes = serializers.IntegerField()
    worked_minutes = serializers.IntegerField()
    early_in_minutes = serializers.IntegerField()
    late_out_minutes = serializers.IntegerField()


class AttendanceDaySerializer(serializers.Serializer):
    attendance_date = serializers.DateField()
    record_id = serializers.IntegerField(allow_null=True)
    attendance_status = serializers.CharField()
    day_type = serializers.CharField()
    holiday_name = serializers.CharField(allow_blank=True)
    holiday_type = serializers.CharField(allow_blank=True)
    is_rest_day = serializers.BooleanField()
    leave_type = serializers.CharField(allow_blank=True)
    shift_code = serializers.CharField(allow_blank=True)
    reconciled = ReconciledDaySerializer()


class ReconciledPeriodQuerySerializer(serializers.Serializer):
    employee = serializers.IntegerField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()

    def validate(self, attrs):
        if attrs["end_date"] < attrs["start_date"]:
            raise serializers.ValidationError(
                {"end_date": "End date cannot be before start date."}
            )
        return attrs
