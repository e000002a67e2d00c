"""Root URL configuration."""
from __future__ import annotations

from django.urls import include, path, re_path

from weather_relay.api.views import HealthView, IndexView, not_found

urlpatterns = [
    path("", IndexView.as_view(), name="index"),
    path("health", HealthView.as_view(), name="health"),
    path("api/", include("weather_relay.api.urls")),
    re_path(r"^.*$", not_found, name="not-found"),
]
