from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


DEFAULT_TIMEZONE = "auto"


@dataclass(frozen=True)
class CoordinateQuery:
    """Validated coordinates of a weather request.

    ``timezone`` is forwarded verbatim to the upstream provider, which
    understands either an IANA name or ``"auto"``.
    """

    latitude: float
    longitude: float
    timezone: str = DEFAULT_TIMEZONE


@dataclass(frozen=True)
class LocationCount:
    location: str
    count: int

    def as_dict(self) -> Dict[str, Any]:
        return {"location": self.location, "count": self.count}


@dataclass(frozen=True)
class AnalyticsSnapshot:
    total_requests: int
    popular_locations: List[LocationCount]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "totalRequests": self.total_requests,
            "popularLocations": [entry.as_dict() for entry in self.popular_locations],
        }


@dataclass(frozen=True)
class ServerInfo:
    instance: str
    hostname: str

    def as_dict(self) -> Dict[str, str]:
        return {"instance": self.instance, "hostname": self.hostname}


def utc_timestamp(value: Optional[datetime] = None) -> str:
    """Format ``value`` (default: now) as ISO-8601 UTC with a ``Z`` suffix."""

    value = value or datetime.now(timezone.utc)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = [
    "AnalyticsSnapshot",
    "CoordinateQuery",
    "DEFAULT_TIMEZONE",
    "LocationCount",
    "ServerInfo",
    "utc_timestamp",
]
