"""HTTP endpoints of the weather relay."""
from __future__ import annotations

from threading import Lock
from typing import Optional

from django.conf import settings
from django.http import FileResponse, JsonResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from weather_relay.core.entities import utc_timestamp
from weather_relay.core.providers.base import UpstreamError
from weather_relay.core.services.weather_proxy import InvalidInput
from weather_relay.core.state import RelayState


_relay_state: Optional[RelayState] = None
_relay_state_lock = Lock()


def get_relay_state() -> RelayState:
    """Return the process-wide relay state, building it on first use."""
    global _relay_state
    if _relay_state is None:
        with _relay_state_lock:
            if _relay_state is None:
                _relay_state = RelayState.from_settings(settings)
    return _relay_state


def reset_relay_state(state: Optional[RelayState] = None) -> None:
    """Helper for tests to swap or drop the relay state."""
    global _relay_state
    with _relay_state_lock:
        _relay_state = state


def not_found_payload(path: str) -> dict:
    return {"error": "Not found", "path": path, "timestamp": utc_timestamp()}


def not_found(request, *args, **kwargs):
    """Fallback for every unmatched path."""
    return JsonResponse(not_found_payload(request.path), status=404)


class RelayView(APIView):
    """Only the declared handlers exist; other methods fall through to 404."""

    def http_method_not_allowed(self, request, *args, **kwargs):
        return Response(not_found_payload(request.path), status=status.HTTP_404_NOT_FOUND)


class IndexView(RelayView):
    """Serve the dashboard document."""

    def get(self, request, *args, **kwargs):  # noqa: D401
        index_file = settings.PUBLIC_DIR / "index.html"
        if not index_file.is_file():
            return Response(not_found_payload(request.path), status=status.HTTP_404_NOT_FOUND)
        return FileResponse(index_file.open("rb"), content_type="text/html")


class HealthView(RelayView):
    def get(self, request, *args, **kwargs):  # noqa: D401
        return Response(get_relay_state().health(), status=status.HTTP_200_OK)


class AnalyticsView(RelayView):
    def get(self, request, *args, **kwargs):  # noqa: D401
        snapshot = get_relay_state().reporter.snapshot()
        return Response(snapshot.as_dict(), status=status.HTTP_200_OK)


class WeatherView(RelayView):
    """Proxy current conditions and a daily forecast for the given coordinates."""

    def get(self, request, *args, **kwargs):  # noqa: D401
        params = request.query_params
        try:
            payload = get_relay_state().proxy.handle(
                params.get("latitude"),
                params.get("longitude"),
                params.get("timezone"),
            )
        except InvalidInput as exc:
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except UpstreamError as exc:
            return Response(
                {
                    "error": "Failed to fetch weather data",
                    "details": str(exc),
                    "timestamp": utc_timestamp(),
                },
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(payload, status=status.HTTP_200_OK)
