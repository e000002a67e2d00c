from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .base import JsonProvider, UpstreamApiError
from ..entities import CoordinateQuery


CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "weather_code",
    "surface_pressure",
    "wind_speed_10m",
    "wind_direction_10m",
    "uv_index",
)

DAILY_FIELDS = (
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
)


class OpenMeteoProvider(JsonProvider):
    base_url = "https://api.open-meteo.com/v1/forecast"
    label = "Open-Meteo API"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self._log = logging.getLogger(self.__class__.__name__)

    def forecast(self, query: CoordinateQuery) -> Dict[str, Any]:
        """Return the raw forecast document for ``query``.

        The document is not normalized; callers receive exactly what the
        provider sent.
        """

        params = {
            "latitude": query.latitude,
            "longitude": query.longitude,
            "current": ",".join(CURRENT_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
            "timezone": query.timezone,
        }
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)
        if data.get("error"):
            reason = data.get("reason") or "API returned an error"
            self._log.error("%s reported an error: %s", self.label, reason)
            raise UpstreamApiError(reason)
        return data


__all__ = ["CURRENT_FIELDS", "DAILY_FIELDS", "OpenMeteoProvider"]
