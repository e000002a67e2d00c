"""Last-resort error boundary for the REST views."""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from weather_relay.core.entities import utc_timestamp


logger = logging.getLogger(__name__)


def relay_exception_handler(exc, context):
    """Keep DRF's handling of API exceptions, hide everything else behind a 500."""

    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception("Server error in %s", view.__class__.__name__ if view else "unknown view", exc_info=exc)
    return Response(
        {"error": "Internal server error", "timestamp": utc_timestamp()},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
