from django.contrib import admin

from agency_ops.meetings import models


class ParticipantInline(admin.TabularInline):
    model = models.MeetingParticipant
    extra = 0


class ExternalParticipantInline(admin.TabularInline):
    model = models.MeetingExternalParticipant
    extra = 0


@admin.register(models.Meeting)
class MeetingAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "type", "meeting_date", "start_time", "status"]
    list_filter = ["type", "mode", "status", "is_confidential"]
    search_fields = ["title"]
    inlines = [ParticipantInline, ExternalParticipantInline]
