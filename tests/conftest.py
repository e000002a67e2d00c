from __future__ import annotations

import pytest

from weather_relay.api.views import reset_relay_state


@pytest.fixture(autouse=True)
def fresh_relay_state():
    """Each test starts with zeroed counters."""
    reset_relay_state()
    yield
    reset_relay_state()


@pytest.fixture()
def upstream_url() -> str:
    return "https://openmeteo.test/v1/forecast"
