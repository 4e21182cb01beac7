from django.contrib import admin

from agency_ops.clients import models


@admin.register(models.Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "company", "status", "client_type", "dashboard_slug"]
    search_fields = ["name", "company", "email"]
    list_filter = ["status", "client_type"]


@admin.register(models.Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "client", "status", "deadline"]
    search_fields = ["title", "client__name"]
    list_filter = ["status", "type"]


class TaskCommentInline(admin.TabularInline):
    model = models.TaskComment
    extra = 0


@admin.register(models.Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "project", "status", "priority", "deadline"]
    search_fields = ["title", "project__title"]
    list_filter = ["status", "priority", "deadline"]
    inlines = [TaskCommentInline]
