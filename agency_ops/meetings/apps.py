from django.apps import AppConfig


class MeetingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "agency_ops.meetings"
    verbose_name = "Meetings"
