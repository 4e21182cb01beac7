"""
WSGI config for the agency_ops project.

Exposes the module-level ``application`` used by Django's development server
and by production WSGI servers (gunicorn) through ``WSGI_APPLICATION``.
"""

import os
import sys
from pathlib import Path

from django.core.wsgi import get_wsgi_application

# Allow app modules inside agency_ops/ to be imported by their short name.
BASE_DIR = Path(__file__).resolve(strict=True).parent.parent
sys.path.append(str(BASE_DIR / "agency_ops"))
# If DJANGO_SETTINGS_MODULE is unset, select a sensible default based on BUILD_ENV
if "DJANGO_SETTINGS_MODULE" not in os.environ:
    build_env = os.environ.get("BUILD_ENV", "production").lower()
    default_settings = (
        "config.settings.local"
        if build_env == "local"
        else "config.settings.production"
    )
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", default_settings)

application = get_wsgi_application()
