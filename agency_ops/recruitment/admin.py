from django.contrib import admin

from agency_ops.recruitment import models


class StatusHistoryInline(admin.TabularInline):
    model = models.CandidateStatusHistory
    extra = 0
    readonly_fields = ["old_status", "new_status", "changed_by", "created_at"]


@admin.register(models.Candidate)
class CandidateAdmin(admin.ModelAdmin):
    list_display = ["id", "full_name", "position", "status", "hr_pic", "applied_at"]
    list_filter = ["status", "position"]
    search_fields = ["full_name", "email"]
    inlines = [StatusHistoryInline]


@admin.register(models.CandidateAssessment)
class CandidateAssessmentAdmin(admin.ModelAdmin):
    list_display = ["id", "candidate", "assessment_type", "rating", "assessor"]
