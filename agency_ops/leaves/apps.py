from django.apps import AppConfig


class LeavesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "agency_ops.leaves"
    verbose_name = "Leaves"
