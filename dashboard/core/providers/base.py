from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Type

import requests
from requests import Response


logger = logging.getLogger(__name__)


class ProviderError(RuntimeError):
    """Base provider error."""


class NotFoundError(ProviderError):
    """Raised when a place name cannot be resolved to coordinates."""


class FetchError(ProviderError):
    """Raised when weather data cannot be retrieved."""


@dataclass
class RequestConfig:
    # None leaves the transport default in place (no timeout).
    timeout: Optional[float] = None


class HttpProvider:
    """Base class for single-attempt JSON-over-HTTP collaborators."""

    error_class: Type[ProviderError] = ProviderError

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text[:200])
            raise self.error_class(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs: Any) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise self.error_class("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise self.error_class("request failed") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> dict:
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise self.error_class("invalid json") from exc
        if not isinstance(data, dict):
            raise self.error_class("unexpected payload")
        return data


__all__ = [
    "FetchError",
    "HttpProvider",
    "NotFoundError",
    "ProviderError",
    "RequestConfig",
]
