"""Process-wide relay state shared by the HTTP views."""
from __future__ import annotations

import time
from typing import Callable, Dict, Optional

from .analytics import AnalyticsReporter, LocationTracker, RequestCounter
from .entities import utc_timestamp
from .providers.base import RequestConfig
from .providers.openmeteo import OpenMeteoProvider
from .services.weather_proxy import WeatherProxy


class RelayState:
    """Owns the counters and wires the proxy and the reporter around them."""

    def __init__(
        self,
        *,
        instance_name: str,
        provider: Optional[OpenMeteoProvider] = None,
        hostname: Optional[str] = None,
        time_func: Callable[[], float] = time.monotonic,
    ) -> None:
        self._time_func = time_func
        self.started_at = time_func()
        self.counter = RequestCounter()
        self.tracker = LocationTracker()
        self.proxy = WeatherProxy(
            provider=provider or OpenMeteoProvider(),
            counter=self.counter,
            tracker=self.tracker,
            instance_name=instance_name,
            hostname=hostname,
        )
        self.reporter = AnalyticsReporter(self.counter, self.tracker)

    @classmethod
    def from_settings(cls, settings) -> "RelayState":
        provider = OpenMeteoProvider(
            base_url=settings.WEATHER_API_URL,
            request_config=RequestConfig(timeout=settings.WEATHER_API_TIMEOUT),
        )
        return cls(instance_name=settings.INSTANCE_NAME, provider=provider)

    @property
    def uptime(self) -> float:
        return self._time_func() - self.started_at

    def health(self) -> Dict[str, object]:
        return {
            "status": "healthy",
            "timestamp": utc_timestamp(),
            "requests": self.counter.value,
            "uptime": self.uptime,
        }


__all__ = ["RelayState"]
