from django.contrib import admin

from agency_ops.employees import models


@admin.register(models.Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ["id", "user", "position", "status", "join_date"]
    search_fields = ["user__username", "user__name", "user__email", "position"]
    list_filter = ["status", "join_date", "created_at"]
    raw_id_fields = ["user"]
