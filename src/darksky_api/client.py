"""Low-level client for the Dark Sky forecast and time-machine endpoints.

API docs: https://darksky.net/dev/docs
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from darksky_api.date_utils import format_time_machine_time
from darksky_api.errors import MissingCoordinates, MissingTime
from darksky_api.query import serialize
from darksky_api.schemas import Forecast
from darksky_api.services.http import session as shared_session

if TYPE_CHECKING:
    import requests

    from darksky_api.schemas import ForecastRequest, RequestParams

logger = logging.getLogger(__name__)

#: Base url for the API. The token and location are appended as path segments.
API_BASE = "https://api.darksky.net/forecast"


class DarkSkyClient:
    """Makes authorized requests to the Dark Sky API.

    Get a token from https://darksky.net/dev/account. Any extra keyword
    arguments (``timeout``, ``proxies``, ...) are passed to ``session.get``
    as they are.
    """

    def __init__(
        self,
        token: str,
        *,
        session: requests.Session | None = None,
        base_url: str = API_BASE,
        **request_config: Any,
    ) -> None:
        self.token = token
        self.session = session if session is not None else shared_session
        self.base_url = base_url.rstrip("/")
        self.request_config = request_config

    def forecast(self, request: ForecastRequest, params: RequestParams | None = None) -> Forecast:
        """
        Make a forecast request for the next week.

        Args:
            request: Location to forecast. ``request.time`` is ignored.
            params: Optional query parameters.

        Raises:
            MissingCoordinates: If latitude or longitude is missing.
            requests.HTTPError: If the API returns an error status.
        """
        return self._get(self._location(request), params or {})

    def time_machine(
        self, request: ForecastRequest, params: RequestParams | None = None
    ) -> Forecast:
        """
        Make a time-machine request for the conditions at ``request.time``.

        Args:
            request: Location and time.
            params: Optional query parameters.

        Raises:
            MissingTime: If ``request.time`` is not set.
            InvalidDate: If ``request.time`` can't be read as a timestamp.
            MissingCoordinates: If latitude or longitude is missing.
            requests.HTTPError: If the API returns an error status.
        """
        time = format_time_machine_time(request.time)
        if time is None:
            msg = "A time is required for a time machine request."
            raise MissingTime(msg)
        return self._get(f"{self._location(request)},{time}", params or {})

    def url(self, path: str, params: RequestParams) -> str:
        """Full request URL for a location path and query parameters."""
        return f"{self.base_url}/{self.token}/{path}{serialize(params)}"

    def _location(self, request: ForecastRequest) -> str:
        if request.latitude is None or request.longitude is None:
            msg = "Both `latitude` and `longitude` are required."
            raise MissingCoordinates(msg)
        return f"{request.latitude},{request.longitude}"

    def _get(self, path: str, params: RequestParams) -> Forecast:
        url = self.url(path, params)
        logger.debug("GET %s", url.replace(self.token, "<token>") if self.token else url)

        resp = self.session.get(url, **self.request_config)
        resp.raise_for_status()

        headers = {key.lower(): value for key, value in resp.headers.items()}
        logger.debug(
            "Forecast API calls: %s, response time: %s",
            headers.get("x-forecast-api-calls"),
            headers.get("x-response-time"),
        )
        return Forecast.from_response(resp.json(), headers)


def create_client(token: str, **kwargs: Any) -> DarkSkyClient:
    """Create a client for ``token``. Keyword arguments go to ``DarkSkyClient``."""
    return DarkSkyClient(token, **kwargs)
