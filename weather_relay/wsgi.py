"""WSGI entry point of the weather relay."""
from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weather_relay.settings")

application = get_wsgi_application()
