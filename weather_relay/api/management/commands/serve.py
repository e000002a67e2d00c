"""Management command serving the relay on all interfaces."""
from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.core.servers.basehttp import get_internal_wsgi_application, run


logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Serve the weather relay with a threaded WSGI server"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--host", type=str, default="0.0.0.0", help="Interface to bind")
        parser.add_argument("--port", type=int, default=None, help="Port (defaults to PORT)")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        host = options["host"]
        port = options["port"] or settings.PORT
        if not 0 < port < 65536:
            raise CommandError(f"Invalid port: {port}")

        logger.info("Weather relay running on port %s", port)
        logger.info("Health check available at: http://localhost:%s/health", port)
        logger.info("Analytics available at: http://localhost:%s/api/analytics", port)
        logger.info("Environment: %s", settings.ENVIRONMENT)

        try:
            run(host, port, get_internal_wsgi_application(), threading=True)
        except KeyboardInterrupt:
            logger.info("Shutting down")
