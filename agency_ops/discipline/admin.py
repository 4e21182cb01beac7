from django.contrib import admin

from agency_ops.discipline.models import DisciplinaryCase


@admin.register(DisciplinaryCase)
class DisciplinaryCaseAdmin(admin.ModelAdmin):
    list_display = ["id", "employee", "case_date", "violation_type", "severity", "status"]
    list_filter = ["severity", "status", "violation_type"]
    search_fields = ["employee__user__name", "description"]
