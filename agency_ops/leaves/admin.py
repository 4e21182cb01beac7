from django.contrib import admin

from agency_ops.leaves.models import LeaveRequest


@admin.register(LeaveRequest)
class LeaveRequestAdmin(admin.ModelAdmin):
    list_display = ["id", "employee", "leave_type", "start_date", "end_date", "status"]
    list_filter = ["status", "leave_type"]
    search_fields = ["employee__user__name", "reason"]
    readonly_fields = ["approved_by", "approved_at", "created_at", "updated_at"]
