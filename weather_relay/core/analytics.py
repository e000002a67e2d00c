"""In-memory request analytics.

Everything here lives for the lifetime of the process and is lost on
restart.  Counters are shared between request threads so every mutation
and read goes through a lock.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from threading import Lock
from typing import Dict, List

from .entities import AnalyticsSnapshot, CoordinateQuery, LocationCount


POPULAR_LOCATIONS_LIMIT = 10

_TWO_PLACES = Decimal("0.01")


def _round_coordinate(value: float) -> str:
    # Decimal(repr()) rounds the value as written, not its binary expansion,
    # so 1.005 buckets with 1.01.
    rounded = Decimal(repr(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:.2f}"


def location_key(latitude: float, longitude: float) -> str:
    """Bucket a coordinate pair to two decimals, e.g. ``"40.71,-74.01"``."""

    return f"{_round_coordinate(latitude)},{_round_coordinate(longitude)}"


class RequestCounter:
    """Monotonic, thread-safe request counter."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class LocationTracker:
    """Counts requests per rounded coordinate pair."""

    def __init__(self) -> None:
        self._counters: Dict[str, int] = {}
        self._lock = Lock()

    def record(self, query: CoordinateQuery) -> str:
        key = location_key(query.latitude, query.longitude)
        with self._lock:
            self._counters[key] = self._counters.get(key, 0) + 1
        return key

    def count(self, key: str) -> int:
        with self._lock:
            return self._counters.get(key, 0)

    def top(self, n: int) -> List[LocationCount]:
        """Return the ``n`` busiest locations, busiest first.

        Ties keep the order in which the locations were first recorded.
        """

        if n <= 0:
            return []
        with self._lock:
            items = list(self._counters.items())
        ranked = sorted(items, key=lambda item: item[1], reverse=True)
        return [LocationCount(location=key, count=count) for key, count in ranked[:n]]


class AnalyticsReporter:
    """Read-only view over the request counter and the location tracker."""

    def __init__(
        self,
        counter: RequestCounter,
        tracker: LocationTracker,
        limit: int = POPULAR_LOCATIONS_LIMIT,
    ) -> None:
        self._counter = counter
        self._tracker = tracker
        self._limit = limit

    def snapshot(self) -> AnalyticsSnapshot:
        return AnalyticsSnapshot(
            total_requests=self._counter.value,
            popular_locations=self._tracker.top(self._limit),
        )


__all__ = [
    "AnalyticsReporter",
    "LocationTracker",
    "POPULAR_LOCATIONS_LIMIT",
    "RequestCounter",
    "location_key",
]
