from django.apps import AppConfig


class RecruitmentConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "agency_ops.recruitment"
    verbose_name = "Recruitment"
