from __future__ import annotations

import pytest

from weather_relay.core.entities import CoordinateQuery
from weather_relay.core.validation import (
    CoordinateError,
    LatitudeOutOfRange,
    LongitudeOutOfRange,
    MissingParameter,
    NotANumber,
    validate,
)


@pytest.mark.parametrize(
    "latitude, longitude",
    [
        ("40.7128", "-74.0060"),
        ("90", "180"),
        ("-90", "-180"),
        ("0", "0"),
        ("-33.8688", "151.2093"),
    ],
)
def test_valid_coordinates_are_parsed_verbatim(latitude: str, longitude: str) -> None:
    query = validate(latitude, longitude, None)

    assert query == CoordinateQuery(latitude=float(latitude), longitude=float(longitude), timezone="auto")


def test_timezone_is_passed_through() -> None:
    query = validate("52.52", "13.41", "Europe/Berlin")

    assert query.timezone == "Europe/Berlin"


def test_empty_timezone_defaults_to_auto() -> None:
    assert validate("52.52", "13.41", "").timezone == "auto"


@pytest.mark.parametrize(
    "latitude, longitude",
    [(None, "10"), ("10", None), (None, None), ("", "10"), ("10", "")],
)
def test_missing_parameters(latitude, longitude) -> None:
    with pytest.raises(MissingParameter) as excinfo:
        validate(latitude, longitude)

    assert str(excinfo.value) == "Missing required parameters: latitude and longitude"


@pytest.mark.parametrize(
    "latitude, longitude",
    [("invalid", "invalid"), ("12.5", "east"), ("nan", "10"), ("1,5", "10"), ("4_0", "1_0"), ("40", "1_0")],
)
def test_non_numeric_values(latitude: str, longitude: str) -> None:
    with pytest.raises(NotANumber):
        validate(latitude, longitude)


@pytest.mark.parametrize("latitude", ["91", "-91", "90.0001", "inf"])
def test_latitude_out_of_range(latitude: str) -> None:
    with pytest.raises(LatitudeOutOfRange) as excinfo:
        validate(latitude, "0")

    assert "between -90 and 90" in str(excinfo.value)


@pytest.mark.parametrize("longitude", ["181", "-181", "-inf"])
def test_longitude_out_of_range(longitude: str) -> None:
    with pytest.raises(LongitudeOutOfRange) as excinfo:
        validate("0", longitude)

    assert "between -180 and 180" in str(excinfo.value)


def test_latitude_is_checked_before_longitude() -> None:
    with pytest.raises(LatitudeOutOfRange):
        validate("100", "200")


def test_errors_share_a_value_error_base() -> None:
    assert issubclass(MissingParameter, CoordinateError)
    assert issubclass(CoordinateError, ValueError)
