"""Weather proxy: validate, track, fetch upstream and enrich."""
from __future__ import annotations

import logging
import socket
from typing import Any, Callable, Dict, Optional

from ..analytics import LocationTracker, RequestCounter
from ..entities import CoordinateQuery, ServerInfo, utc_timestamp
from ..providers.base import ProxyError, UpstreamError
from ..providers.openmeteo import OpenMeteoProvider
from ..validation import CoordinateError, validate


logger = logging.getLogger(__name__)


class InvalidInput(ProxyError):
    """The client sent unusable coordinates; wraps the :class:`CoordinateError`."""

    def __init__(self, error: CoordinateError) -> None:
        super().__init__(str(error))
        self.error = error


class WeatherProxy:
    """Relay coordinate queries to the forecast provider.

    Every call to :meth:`handle` counts as a request, including the ones
    rejected by validation.  Only validated queries are recorded by the
    location tracker and forwarded upstream; there is a single upstream
    attempt per call.
    """

    def __init__(
        self,
        *,
        provider: OpenMeteoProvider,
        counter: RequestCounter,
        tracker: LocationTracker,
        instance_name: str,
        hostname: Optional[str] = None,
        clock: Callable[[], str] = utc_timestamp,
    ) -> None:
        self.provider = provider
        self.counter = counter
        self.tracker = tracker
        self.server_info = ServerInfo(instance=instance_name, hostname=hostname or socket.gethostname())
        self._clock = clock

    def handle(
        self,
        raw_latitude: Optional[str],
        raw_longitude: Optional[str],
        raw_timezone: Optional[str] = None,
    ) -> Dict[str, Any]:
        self.counter.increment()

        try:
            query = validate(raw_latitude, raw_longitude, raw_timezone)
        except CoordinateError as exc:
            logger.debug("Rejected weather request: %s", exc)
            raise InvalidInput(exc) from exc

        self.tracker.record(query)
        return self.fetch(query)

    def fetch(self, query: CoordinateQuery) -> Dict[str, Any]:
        logger.info("Fetching weather data for %s, %s", query.latitude, query.longitude)
        try:
            data = self.provider.forecast(query)
        except UpstreamError as exc:
            logger.error("Error fetching weather data: %s", exc)
            raise
        return self.enrich(data)

    def enrich(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data["server_timestamp"] = self._clock()
        data["server_info"] = self.server_info.as_dict()
        return data


__all__ = ["InvalidInput", "WeatherProxy"]
