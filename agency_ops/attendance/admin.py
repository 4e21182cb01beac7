from django.contrib import admin

from agency_ops.attendance import models


@admin.register(models.Attendance)
class AttendanceAdmin(admin.ModelAdmin):
    list_display = ["id", "employee", "date", "clock_in", "clock_out", "total_break_minutes"]
    search_fields = ["employee__user__username", "employee__user__name", "notes"]
    list_filter = ["date", "created_at", "updated_at"]


@admin.register(models.AutoClockoutNotification)
class AutoClockoutNotificationAdmin(admin.ModelAdmin):
    list_display = ["id", "employee", "attendance", "is_read", "created_at"]
    list_filter = ["is_read", "created_at"]
