from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import Response


class ProxyError(RuntimeError):
    """Base error of the weather proxy."""


class UpstreamError(ProxyError):
    """The upstream provider could not deliver a usable response."""


class UpstreamHttpError(UpstreamError):
    """Raised when the provider answers with a non-success status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamApiError(UpstreamError):
    """Raised when the provider reports an error inside a 2xx body."""


class UpstreamUnreachable(UpstreamError):
    """Raised when the connection to the provider fails."""


class UpstreamTimeout(UpstreamError):
    """Raised when the provider does not answer within the timeout."""


@dataclass
class RequestConfig:
    timeout: float = 10.0


class JsonProvider:
    """Base class for HTTP JSON providers: one attempt, bounded by a timeout."""

    label = "Upstream API"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if not response.ok:
            self._log.error("%s returned %s: %s", self.label, response.status_code, response.text)
            raise UpstreamHttpError(
                f"{self.label} responded with status: {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise UpstreamTimeout(
                f"{self.label} did not respond within {self.request_config.timeout:g}s"
            ) from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise UpstreamUnreachable(f"{self.label} request failed: {exc}") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> dict:
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise UpstreamApiError(f"{self.label} returned invalid JSON") from exc
        if not isinstance(data, dict):
            raise UpstreamApiError(f"{self.label} returned invalid JSON")
        return data


__all__ = [
    "JsonProvider",
    "ProxyError",
    "RequestConfig",
    "UpstreamApiError",
    "UpstreamError",
    "UpstreamHttpError",
    "UpstreamTimeout",
    "UpstreamUnreachable",
]
