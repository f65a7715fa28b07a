from __future__ import annotations

from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from commandbot.data.upstream_client import UpstreamClient, UpstreamClientError


@pytest.fixture()
def upstream_client() -> UpstreamClient:
    return UpstreamClient(timeout_seconds=3)


def _mock_response(status_code: int, json_data: Any = None, text: str = "") -> Mock:
    response = Mock()
    response.status_code = status_code
    response.text = text
    if json_data is not None:
        response.json.return_value = json_data
    else:
        response.json.side_effect = ValueError("Invalid JSON")
    return response


def test_get_json_returns_body(upstream_client: UpstreamClient) -> None:
    response = _mock_response(200, {"ip": "8.8.8.8"})
    with patch("requests.get", return_value=response) as mock_get:
        body = upstream_client.get_json("http://ipinfo.example.test/8.8.8.8/json")

    assert body == {"ip": "8.8.8.8"}
    mock_get.assert_called_once_with(
        "http://ipinfo.example.test/8.8.8.8/json", params=None, timeout=3
    )


def test_get_json_passes_params(upstream_client: UpstreamClient) -> None:
    response = _mock_response(200, {"total_count": 1})
    with patch("requests.get", return_value=response) as mock_get:
        upstream_client.get_json("https://api.example.test/v1/link/", params={"page": "https://a.b"})

    assert mock_get.call_args.kwargs["params"] == {"page": "https://a.b"}


def test_non_200_raises_upstream_client_error(upstream_client: UpstreamClient) -> None:
    response = _mock_response(404, {"error": "Not found"}, text="Not found")
    with patch("requests.get", return_value=response):
        with pytest.raises(UpstreamClientError) as exc_info:
            upstream_client.get_json("https://api.example.test/v1/nea/nowcast")

    assert "404" in str(exc_info.value)
    assert "Not found" in str(exc_info.value)


def test_network_error_raises_upstream_client_error(upstream_client: UpstreamClient) -> None:
    with patch("requests.get", side_effect=requests.exceptions.ConnectionError("boom")):
        with pytest.raises(UpstreamClientError):
            upstream_client.get_json("https://api.example.test/v1/nea/nowcast")


def test_timeout_raises_upstream_client_error(upstream_client: UpstreamClient) -> None:
    with patch("requests.get", side_effect=requests.exceptions.Timeout("slow")):
        with pytest.raises(UpstreamClientError):
            upstream_client.get_json("https://api.example.test/v1/nea/psipm25")


def test_invalid_json_raises_upstream_client_error(upstream_client: UpstreamClient) -> None:
    response = _mock_response(200, None)
    with patch("requests.get", return_value=response):
        with pytest.raises(UpstreamClientError):
            upstream_client.get_json("https://api.example.test/v1/nea/psipm25")
