from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weather_relay.settings")
os.environ["INSTANCE_NAME"] = "test-instance"
os.environ["WEATHER_API_URL"] = "https://openmeteo.test/v1/forecast"

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker
