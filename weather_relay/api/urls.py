"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from weather_relay.api.views import AnalyticsView, WeatherView

urlpatterns = [
    path("weather", WeatherView.as_view(), name="weather"),
    path("analytics", AnalyticsView.as_view(), name="analytics"),
]
