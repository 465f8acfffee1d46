"""Shared fixtures: a mocked transport for the shared HTTP session."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any
from unittest.mock import Mock, patch

import pytest

BASE_RESPONSE: dict[str, Any] = {
    "latitude": 42,
    "longitude": 24,
    "timezone": "UTC",
}

RESPONSE_HEADERS = {
    "X-Forecast-API-Calls": "17",
    "X-Response-Time": "42.123ms",
    "Content-Type": "application/json",
}


def make_response(body: dict[str, Any] | None = None) -> Mock:
    """Build a successful response mock carrying ``body`` and the API headers."""
    resp = Mock()
    resp.json.return_value = {**BASE_RESPONSE, **(body or {})}
    resp.headers = dict(RESPONSE_HEADERS)
    resp.raise_for_status = Mock()
    return resp


@pytest.fixture
def mock_get() -> Iterator[Mock]:
    """Patch ``session.get`` on the shared session; returns the base response."""
    with patch("darksky_api.services.http.session.get") as get:
        get.return_value = make_response()
        yield get


def requested_url(get: Mock) -> str:
    """URL of the last GET."""
    url: str = get.call_args.args[0]
    return url
