"""Tests for request constants and response models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from darksky_api.schemas import (
    EXCLUDE_ALL,
    ONLY_CURRENTLY,
    ONLY_DAILY,
    ONLY_HOURLY,
    ONLY_MINUTELY,
    Alert,
    CurrentForecast,
    DataBlock,
    DataPoint,
    Exclude,
    Forecast,
    Severity,
    Units,
    WeatherIcon,
)


class TestExclusionSets:
    """Each ONLY_* set names the three other time blocks."""

    @pytest.mark.parametrize(
        ("only", "kept"),
        [
            (ONLY_CURRENTLY, Exclude.CURRENTLY),
            (ONLY_MINUTELY, Exclude.MINUTELY),
            (ONLY_HOURLY, Exclude.HOURLY),
            (ONLY_DAILY, Exclude.DAILY),
        ],
    )
    def test_only_sets(self, only: tuple[Exclude, ...], kept: Exclude) -> None:
        assert len(only) == 3
        assert kept not in only
        assert set(only) | {kept} == set(EXCLUDE_ALL)

    def test_exclude_all_is_time_blocks(self) -> None:
        assert Exclude.ALERTS not in EXCLUDE_ALL
        assert Exclude.FLAGS not in EXCLUDE_ALL
        assert len(EXCLUDE_ALL) == 4

    def test_units_values(self) -> None:
        assert [u.value for u in Units] == ["auto", "ca", "uk2", "us", "si"]


class TestForecastModel:
    """Test response parsing."""

    def test_minimal(self) -> None:
        forecast = Forecast.from_response({"latitude": 1, "longitude": 2, "timezone": "UTC"}, {})
        assert forecast.currently is None
        assert forecast.alerts is None
        assert forecast.headers.api_calls is None

    def test_headers(self) -> None:
        forecast = Forecast.from_response(
            {"latitude": 1, "longitude": 2, "timezone": "UTC"},
            {"x-forecast-api-calls": "3", "x-response-time": "10ms"},
        )
        assert forecast.headers.api_calls == "3"
        assert forecast.headers.response_time == "10ms"

    def test_camel_case_fields(self) -> None:
        point = DataPoint.model_validate(
            {"time": 1, "precipIntensityMaxTime": 2, "uvIndex": 5, "windGust": 3.5}
        )
        assert point.precip_intensity_max_time == 2
        assert point.uv_index == 5
        assert point.wind_gust == 3.5

    def test_unknown_fields_kept(self) -> None:
        point = DataPoint.model_validate({"time": 1, "smokeIndex": 9})
        assert point.model_extra == {"smokeIndex": 9}

    def test_known_icon(self) -> None:
        point = DataPoint.model_validate({"time": 1, "icon": "partly-cloudy-night"})
        assert point.icon is WeatherIcon.PARTLY_CLOUDY_NIGHT

    def test_unrecognized_icon_is_unknown(self) -> None:
        block = DataBlock.model_validate({"icon": "smoke", "data": [{"time": 1, "icon": "haze"}]})
        assert block.icon is WeatherIcon.UNKNOWN
        assert block.data[0].icon is WeatherIcon.UNKNOWN

    def test_missing_icon(self) -> None:
        assert DataPoint.model_validate({"time": 1}).icon is None

    def test_alerts(self) -> None:
        forecast = Forecast.model_validate(
            {
                "latitude": 1,
                "longitude": 2,
                "timezone": "UTC",
                "alerts": [
                    {
                        "title": "Flood Watch",
                        "severity": "watch",
                        "regions": ["Middlesex"],
                        "expires": 1558100000,
                    }
                ],
            }
        )
        assert forecast.alerts is not None
        alert: Alert = forecast.alerts[0]
        assert alert.severity == Severity.WATCH
        assert alert.regions == ["Middlesex"]

    def test_missing_location_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Forecast.model_validate({"timezone": "UTC"})

    def test_current_forecast_requires_block(self) -> None:
        with pytest.raises(ValidationError):
            CurrentForecast.model_validate({"latitude": 1, "longitude": 2, "timezone": "UTC"})
