"""HTTP client for the upstream data APIs."""

from __future__ import annotations

from typing import Any

import requests

from commandbot.logger import logger


class UpstreamClientError(Exception):
    """Raised when an upstream request fails or returns a non-200 response."""


class UpstreamClient:
    """Thin wrapper around requests that fetches and parses JSON bodies."""

    def __init__(self, timeout_seconds: int = 10) -> None:
        self._timeout_seconds = timeout_seconds

    def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``url`` and return the decoded JSON body."""
        try:
            response = requests.get(url, params=params, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            logger.warning("Upstream request to %s failed: %s", url, exc)
            raise UpstreamClientError(f"Upstream request failed: {exc}") from exc

        if response.status_code != 200:
            body_text = response.text.strip()
            detail = f"Status {response.status_code}"
            if body_text:
                detail = f"{detail}, Body: {body_text}"
            logger.warning("Upstream request to %s failed: %s", url, detail)
            raise UpstreamClientError(f"Upstream request failed: {detail}")

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamClientError("Upstream response was not valid JSON") from exc


__all__ = ["UpstreamClient", "UpstreamClientError"]
