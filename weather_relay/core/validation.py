"""Validation of the coordinate query parameters of ``/api/weather``."""
from __future__ import annotations

import math
from typing import Optional

from .entities import DEFAULT_TIMEZONE, CoordinateQuery


class CoordinateError(ValueError):
    """Base class for client-side mistakes in the coordinate parameters."""

    message = "Invalid coordinates"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class MissingParameter(CoordinateError):
    message = "Missing required parameters: latitude and longitude"


class NotANumber(CoordinateError):
    message = "Invalid latitude or longitude values"


class LatitudeOutOfRange(CoordinateError):
    message = "Latitude must be between -90 and 90 degrees"


class LongitudeOutOfRange(CoordinateError):
    message = "Longitude must be between -180 and 180 degrees"


def _parse(value: str) -> float:
    # float() also accepts digit separators ("4_0").
    if "_" in value:
        raise NotANumber()
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise NotANumber() from exc
    if math.isnan(number):
        raise NotANumber()
    return number


def validate(
    raw_latitude: Optional[str],
    raw_longitude: Optional[str],
    raw_timezone: Optional[str] = None,
) -> CoordinateQuery:
    """Parse raw query parameters into a :class:`CoordinateQuery`.

    Empty strings count as absent. Raises a :class:`CoordinateError` subclass
    describing the first problem found.
    """

    if not raw_latitude or not raw_longitude:
        raise MissingParameter()

    latitude = _parse(raw_latitude)
    longitude = _parse(raw_longitude)

    if not -90 <= latitude <= 90:
        raise LatitudeOutOfRange()
    if not -180 <= longitude <= 180:
        raise LongitudeOutOfRange()

    return CoordinateQuery(
        latitude=latitude,
        longitude=longitude,
        timezone=raw_timezone or DEFAULT_TIMEZONE,
    )


__all__ = [
    "CoordinateError",
    "LatitudeOutOfRange",
    "LongitudeOutOfRange",
    "MissingParameter",
    "NotANumber",
    "validate",
]
