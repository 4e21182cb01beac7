from django.contrib import admin

from agency_ops.audit import models


@admin.register(models.AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ["id", "action", "actor", "model_name", "record_id", "created_at"]
    search_fields = ["action", "message", "model_name", "ip_address"]
    list_filter = ["action", "model_name", "created_at"]
    readonly_fields = [f.name for f in models.AuditLog._meta.fields]  # noqa: SLF001
