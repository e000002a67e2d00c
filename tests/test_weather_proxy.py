from __future__ import annotations

import socket

import pytest

from weather_relay.core.analytics import LocationTracker, RequestCounter
from weather_relay.core.providers.base import UpstreamHttpError
from weather_relay.core.providers.openmeteo import OpenMeteoProvider
from weather_relay.core.services.weather_proxy import InvalidInput, WeatherProxy
from weather_relay.core.validation import LatitudeOutOfRange, MissingParameter


@pytest.fixture
def proxy(upstream_url: str) -> WeatherProxy:
    return WeatherProxy(
        provider=OpenMeteoProvider(base_url=upstream_url),
        counter=RequestCounter(),
        tracker=LocationTracker(),
        instance_name="relay-1",
        hostname="box.local",
        clock=lambda: "2024-05-01T12:00:00.000Z",
    )


def test_handle_enriches_upstream_body(proxy: WeatherProxy, requests_mock, upstream_url: str) -> None:
    requests_mock.get(upstream_url, json={"timezone": "America/New_York", "current": {"temperature_2m": 21.4}})

    data = proxy.handle("40.7128", "-74.0060", None)

    assert data == {
        "timezone": "America/New_York",
        "current": {"temperature_2m": 21.4},
        "server_timestamp": "2024-05-01T12:00:00.000Z",
        "server_info": {"instance": "relay-1", "hostname": "box.local"},
    }
    assert requests_mock.last_request.qs["timezone"] == ["auto"]
    assert proxy.counter.value == 1
    assert proxy.tracker.count("40.71,-74.01") == 1


def test_invalid_input_counts_but_skips_upstream(proxy: WeatherProxy, requests_mock) -> None:
    with pytest.raises(InvalidInput) as excinfo:
        proxy.handle("95", "10")

    assert isinstance(excinfo.value.error, LatitudeOutOfRange)
    assert requests_mock.call_count == 0
    assert proxy.counter.value == 1
    assert proxy.tracker.top(10) == []


def test_missing_parameters_are_wrapped(proxy: WeatherProxy) -> None:
    with pytest.raises(InvalidInput) as excinfo:
        proxy.handle(None, None)

    assert isinstance(excinfo.value.error, MissingParameter)
    assert str(excinfo.value) == "Missing required parameters: latitude and longitude"


def test_upstream_failure_still_records_location(proxy: WeatherProxy, requests_mock, upstream_url: str) -> None:
    requests_mock.get(upstream_url, status_code=500)

    with pytest.raises(UpstreamHttpError):
        proxy.handle("10", "20")

    assert proxy.counter.value == 1
    assert proxy.tracker.count("10.00,20.00") == 1


def test_hostname_defaults_to_machine_name(upstream_url: str) -> None:
    proxy = WeatherProxy(
        provider=OpenMeteoProvider(base_url=upstream_url),
        counter=RequestCounter(),
        tracker=LocationTracker(),
        instance_name="weather-app",
    )

    assert proxy.server_info.hostname == socket.gethostname()
