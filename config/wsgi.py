"""
WSGI config for the timepay project.

It exposes the WSGI callable as a module-level variable named ``application``.
Django's ``runserver`` discovers it via the ``WSGI_APPLICATION`` setting.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.base")

application = get_wsgi_application()
