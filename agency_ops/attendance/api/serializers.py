from rest_framework import serializers

from agency_ops.attendance.models import Attendance
from agency_ops.attendance.models import AutoClockoutNotification


class AttendanceSerializer(serializers.ModelSerializer):
    employee_name = serializers.CharField(source="employee.full_name", read_only=True)
    work_minutes = serializers.IntegerField(read_only=True)
    work_duration = serializers.SerializerMethodField()
    on_break = serializers.BooleanField(read_only=True)
    is_auto_clockout = serializers.BooleanField(read_only=True)

    class Meta:
        model = Attendance
        fields = [
            "id",
            "employee",
            "employee_name",
            "date",
            "clock_in",
            "clock_out",
            "break_start",
            "break_end",
            "total_break_minutes",
            "on_break",
            "work_minutes",
            "work_duration",
            "notes",
            "tasks_completed",
            "is_auto_clockout",
            "photo_clock_in",
            "photo_clock_out",
        ]
        read_only_fields = fields

    def get_work_duration(self, obj) -> str:
        hours, minutes = divmod(obj.work_minutes, 60)
        return f"{hours:02d}:{minutes:02d}"


class ClockInSerializer(serializers.Serializer):
    notes = serializers.CharField(required=False, allow_blank=True, default="")
    photo = serializers.ImageField(required=False, allow_null=True)


class ClockOutSerializer(serializers.Serializer):
    notes = serializers.CharField(required=False, allow_blank=True, default="")
    tasks_completed = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False
    )
    photo = serializers.ImageField(required=False, allow_null=True)


class AutoClockoutNotificationSerializer(serializers.ModelSerializer):
    date = serializers.DateField(source="attendance.date", read_only=True)

    class Meta:
        model = AutoClockoutNotification
        fields = ["id", "attendance", "date", "message", "is_read", "created_at"]
        read_only_fields = fields
