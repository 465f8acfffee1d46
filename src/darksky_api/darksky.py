"""High-level wrapper with request defaults and shortcut forecasts.

Example::

    darksky = DarkSky("api-token", DarkSkyOptions(units=Units.SI, lang=Language.FRENCH))
    week = darksky.week(45.5, -122.6, {"lang": Language.ENGLISH})
    print(week.daily.data[1].temperature_max)
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, TypeVar

from darksky_api.chain import DarkSkyOptions, RequestChain
from darksky_api.client import DarkSkyClient
from darksky_api.errors import not_found
from darksky_api.schemas import (
    CurrentForecast,
    DayForecast,
    ForecastRequest,
    HourForecast,
    Language,
    Units,
    WeekForecast,
)

if TYPE_CHECKING:
    import requests

    from darksky_api.schemas import (
        Forecast,
        NumberString,
        RequestParams,
        TimeMachineDate,
    )

F = TypeVar("F", bound="Forecast")


class DarkSky:
    """Dark Sky API wrapper.

    Options given here are defaults for every request; ``params`` passed to a
    method override them for that call.
    """

    def __init__(
        self,
        token: str,
        options: DarkSkyOptions | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.token = token
        self.options = replace(options) if options else DarkSkyOptions()
        if self.options.units is None:
            self.options.units = Units.AUTO
        if self.options.lang is None:
            self.options.lang = Language.ENGLISH
        self.client = DarkSkyClient(token, session=session, **self.options.request_config)

    @property
    def request_params(self) -> RequestParams:
        """The default query parameters."""
        return self.options.request_params()

    def forecast(
        self,
        latitude: NumberString,
        longitude: NumberString,
        params: RequestParams | None = None,
    ) -> Forecast:
        """Forecast for a location, with ``params`` over the defaults."""
        return self.client.forecast(
            ForecastRequest(latitude, longitude), {**self.request_params, **(params or {})}
        )

    def time_machine(
        self,
        latitude: NumberString,
        longitude: NumberString,
        time: TimeMachineDate,
        params: RequestParams | None = None,
    ) -> Forecast:
        """Observed or forecast conditions for a location at ``time``."""
        return self.client.time_machine(
            ForecastRequest(latitude, longitude, time), {**self.request_params, **(params or {})}
        )

    def chain(self, latitude: NumberString, longitude: NumberString) -> RequestChain:
        """Start a request chain seeded with this wrapper's defaults."""
        return RequestChain(self.token, latitude, longitude, self.options, client=self.client)

    def current(
        self,
        latitude: NumberString,
        longitude: NumberString,
        params: RequestParams | None = None,
    ) -> CurrentForecast:
        """
        Current conditions only.

        Raises:
            NotFound: If the response has no ``currently`` data point.
        """
        result = self.chain(latitude, longitude).params(params).only_currently().execute()
        return _require(result, "currently", CurrentForecast)

    def week(
        self,
        latitude: NumberString,
        longitude: NumberString,
        params: RequestParams | None = None,
    ) -> WeekForecast:
        """
        Day-by-day forecast for the next week.

        Raises:
            NotFound: If the response has no ``daily`` data block.
        """
        result = self.chain(latitude, longitude).params(params).only_daily().execute()
        return _require(result, "daily", WeekForecast)

    def day(
        self,
        latitude: NumberString,
        longitude: NumberString,
        params: RequestParams | None = None,
    ) -> DayForecast:
        """
        Hour-by-hour forecast for the next two days (a week when extended).

        Raises:
            NotFound: If the response has no ``hourly`` data block.
        """
        result = self.chain(latitude, longitude).params(params).only_hourly().execute()
        return _require(result, "hourly", DayForecast)

    def hour(
        self,
        latitude: NumberString,
        longitude: NumberString,
        params: RequestParams | None = None,
    ) -> HourForecast:
        """
        Minute-by-minute forecast for the next hour.

        Raises:
            NotFound: If the response has no ``minutely`` data block.
        """
        result = self.chain(latitude, longitude).params(params).only_minutely().execute()
        return _require(result, "minutely", HourForecast)


def _require(result: Forecast, block: str, model: type[F]) -> F:
    if getattr(result, block) is None:
        msg = f"The response for {result.latitude},{result.longitude} has no `{block}` data."
        raise not_found(msg)
    return model.model_validate(result.model_dump(by_alias=True))
