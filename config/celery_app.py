"""Celery application for background payroll work.

Workers run `celery -A config.celery_app worker`; payroll computation is
queued by `timepay.payroll.tasks.compute_run_task`.
"""

import os

from celery import Celery
from celery.signals import setup_logging

# pytest passes --ds=config.settings.test, which setdefault leaves alone.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.base")

app = Celery("timepay")

# Every CELERY_* Django setting configures the app.
app.config_from_object("django.conf:settings", namespace="CELERY")


@setup_logging.connect
def config_loggers(*args, **kwargs):
    """Log from workers through the same LOGGING dictConfig as the web process."""
    from logging.config import dictConfig  # noqa: PLC0415

    from django.conf import settings  # noqa: PLC0415

    dictConfig(settings.LOGGING)


# Picks up timepay.payroll.tasks.
app.autodiscover_tasks()
