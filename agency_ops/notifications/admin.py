from django.contrib import admin

from agency_ops.notifications import models


@admin.register(models.Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ["id", "recipient", "title", "notification_type", "is_read"]
    search_fields = ["title", "message", "notification_type", "related_link"]
    list_filter = ["notification_type", "is_read", "created_at"]


@admin.register(models.EmailLog)
class EmailLogAdmin(admin.ModelAdmin):
    list_display = ["id", "recipient_email", "subject", "notification_type", "status"]
    search_fields = ["recipient_email", "subject", "related_id"]
    list_filter = ["status", "notification_type", "created_at"]
