"""Fluent request builder.

Example::

    # Only get the hourly forecast, and extend it.
    create_request_chain("api-token", 42, -42).units(Units.CA).only_hourly(extend=True).execute()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from darksky_api.client import DarkSkyClient
from darksky_api.errors import MissingCoordinates
from darksky_api.schemas import (
    ONLY_CURRENTLY,
    ONLY_DAILY,
    ONLY_HOURLY,
    ONLY_MINUTELY,
    Exclude,
    Extend,
    ForecastRequest,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from darksky_api.schemas import (
        Forecast,
        Language,
        NumberString,
        RequestParams,
        TimeMachineDate,
        Units,
    )


@dataclass
class DarkSkyOptions:
    """Defaults applied to every request made through a wrapper or chain.

    ``request_config`` is passed to ``session.get`` untouched (``timeout``, ...).
    """

    units: Units | None = None
    lang: Language | None = None
    extend_hourly: bool = False
    exclude: list[Exclude] | None = None
    request_config: dict[str, Any] = field(default_factory=dict)

    def request_params(self) -> RequestParams:
        """Query parameters described by these options."""
        params: RequestParams = {}
        if self.units is not None:
            params["units"] = self.units
        if self.lang is not None:
            params["lang"] = self.lang
        if self.exclude:
            params["exclude"] = _unique(self.exclude)
        if self.extend_hourly:
            params["extend"] = Extend.HOURLY
        return params


class RequestChain:
    """Builds up a request through chained calls, then runs it with ``execute()``.

    Every method except ``execute`` changes the chain and returns it. A chain
    can be executed again; it replays the same parameters.
    """

    def __init__(
        self,
        token: str,
        latitude: NumberString | None = None,
        longitude: NumberString | None = None,
        options: DarkSkyOptions | None = None,
        *,
        client: DarkSkyClient | None = None,
    ) -> None:
        options = options or DarkSkyOptions()
        self.client = client or DarkSkyClient(token, **options.request_config)
        self.request = ForecastRequest(latitude=latitude, longitude=longitude)
        self.request_params: RequestParams = options.request_params()

    def coordinates(self, latitude: NumberString, longitude: NumberString) -> RequestChain:
        """Set the location of the request."""
        self.request.latitude = latitude
        self.request.longitude = longitude
        return self

    def params(self, params: RequestParams | None = None) -> RequestChain:
        """Merge ``params`` over the current query parameters, key by key."""
        if params:
            self.request_params = {**self.request_params, **params}
            if self.request_params.get("exclude"):
                self.request_params["exclude"] = _unique(self.request_params["exclude"])
        return self

    def time(self, time: TimeMachineDate) -> RequestChain:
        """Make a time-machine request for ``time`` instead of a forecast."""
        self.request.time = time
        return self

    def units(self, units: Units) -> RequestChain:
        self.request_params["units"] = units
        return self

    def language(self, language: Language) -> RequestChain:
        self.request_params["lang"] = language
        return self

    def extend_hourly(self, extend: bool = True) -> RequestChain:  # noqa: FBT001, FBT002
        """Return hour-by-hour data for the next 168 hours instead of 48."""
        self.request_params["extend"] = Extend.HOURLY if extend else None
        return self

    def exclude(self, *exclude: Exclude) -> RequestChain:
        """Leave the given data blocks out of the response."""
        for name in exclude:
            self._add_exclude(name)
        return self

    def exclude_currently(self) -> RequestChain:
        self._add_exclude(Exclude.CURRENTLY)
        return self

    def exclude_minutely(self) -> RequestChain:
        self._add_exclude(Exclude.MINUTELY)
        return self

    def exclude_hourly(self) -> RequestChain:
        self._add_exclude(Exclude.HOURLY)
        return self

    def exclude_daily(self) -> RequestChain:
        self._add_exclude(Exclude.DAILY)
        return self

    def exclude_flags(self) -> RequestChain:
        self._add_exclude(Exclude.FLAGS)
        return self

    def exclude_alerts(self) -> RequestChain:
        self._add_exclude(Exclude.ALERTS)
        return self

    def only_currently(self) -> RequestChain:
        """Exclude every time block except ``currently``."""
        return self.exclude(*ONLY_CURRENTLY)

    def only_minutely(self) -> RequestChain:
        """Exclude every time block except ``minutely``."""
        return self.exclude(*ONLY_MINUTELY)

    def only_hourly(self, extend: bool | None = None) -> RequestChain:
        """
        Exclude every time block except ``hourly``.

        Args:
            extend: If given, passed on to ``extend_hourly``.
        """
        self.exclude(*ONLY_HOURLY)
        if extend is not None:
            self.extend_hourly(extend)
        return self

    def only_daily(self) -> RequestChain:
        """Exclude every time block except ``daily``."""
        return self.exclude(*ONLY_DAILY)

    def execute(self) -> Forecast:
        """
        Send the request and wait for the response.

        This blocks on a single GET; nothing is retried.

        Returns:
            The parsed forecast, or the time-machine response if ``time`` was set.

        Raises:
            MissingCoordinates: If the location was never set.
        """
        latitude, longitude = self.request.latitude, self.request.longitude
        if latitude is None or longitude is None:
            msg = "Both `latitude` and `longitude` are required, call `coordinates()` first."
            raise MissingCoordinates(msg)

        time = self.request.time

        params: RequestParams = {**self.request_params}
        if time is not None:
            return self.client.time_machine(ForecastRequest(latitude, longitude, time), params)
        return self.client.forecast(ForecastRequest(latitude, longitude), params)

    def _add_exclude(self, exclude: Exclude) -> None:
        current = self.request_params.get("exclude") or []
        if exclude not in current:
            self.request_params["exclude"] = [*current, exclude]


def _unique(names: Iterable[Exclude]) -> list[Exclude]:
    return list(dict.fromkeys(names))


def create_request_chain(
    token: str,
    latitude: NumberString,
    longitude: NumberString,
    options: DarkSkyOptions | None = None,
) -> RequestChain:
    """
    Create a request chain for a location.

    Args:
        token: Dark Sky developer API token.
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
        options: Defaults for the request.
    """
    return RequestChain(token, latitude, longitude, options)
