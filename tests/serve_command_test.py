from __future__ import annotations

from unittest import mock

import pytest
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import CommandError


RUN = "weather_relay.api.management.commands.serve.run"


def test_serve_uses_configured_port() -> None:
    with mock.patch(RUN) as run:
        call_command("serve")

    host, port, handler = run.call_args.args
    assert (host, port) == ("0.0.0.0", settings.PORT)
    assert callable(handler)
    assert run.call_args.kwargs == {"threading": True}


def test_serve_port_override() -> None:
    with mock.patch(RUN) as run:
        call_command("serve", "--port", "9001", "--host", "127.0.0.1")

    assert run.call_args.args[:2] == ("127.0.0.1", 9001)


def test_serve_rejects_invalid_port() -> None:
    with mock.patch(RUN) as run, pytest.raises(CommandError):
        call_command("serve", "--port", "70000")

    run.assert_not_called()
