"""
WSGI entry point for hr_portal.

Exposes ``application`` for ``runserver`` (through ``WSGI_APPLICATION``) and
for production WSGI servers.
"""

import os
import sys
from pathlib import Path

from django.core.wsgi import get_wsgi_application

# Apps live inside the hr_portal directory
BASE_DIR = Path(__file__).resolve(strict=True).parent.parent
sys.path.append(str(BASE_DIR / "hr_portal"))

# BUILD_ENV=local picks the development settings when none are given
_settings_by_env = {"local": "config.settings.local"}
os.environ.setdefault(
    "DJANGO_SETTINGS_MODULE",
    _settings_by_env.get(
        os.environ.get("BUILD_ENV", "production").lower(),
        "config.settings.production",
    ),
)

application = get_wsgi_application()
