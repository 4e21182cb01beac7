from django.apps import AppConfig


class DisciplineConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "agency_ops.discipline"
    verbose_name = "Discipline"
