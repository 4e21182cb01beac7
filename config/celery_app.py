import os

from celery import Celery
from celery.signals import setup_logging

# Deployed workers and beat run with production settings unless told otherwise.
# pytest sets DJANGO_SETTINGS_MODULE through --ds, so setdefault leaves it alone.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.production")

app = Celery("agency_ops")

# Every Celery option lives in Django settings under the CELERY_ prefix,
# including CELERY_BEAT_SCHEDULE for the midnight attendance and finance jobs.
app.config_from_object("django.conf:settings", namespace="CELERY")


@setup_logging.connect
def config_loggers(*args, **kwargs):
    from logging.config import dictConfig  # noqa: PLC0415

    from django.conf import settings  # noqa: PLC0415

    dictConfig(settings.LOGGING)


# Picks up agency_ops.<app>.tasks for every installed app.
app.autodiscover_tasks()
