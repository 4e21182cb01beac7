from django.apps import AppConfig


class ReportsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "agency_ops.reports"
    verbose_name = "Social media reports"
