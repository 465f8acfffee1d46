"""
Request and response models for the Dark Sky API.

Enums and ``RequestParams`` describe what goes into a request; the pydantic
models describe the JSON that comes back. Response models use snake_case
attributes with the API's camelCase names as aliases, and keep any fields
they do not declare.

API docs: https://darksky.net/dev/docs
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Annotated, Any, TypedDict

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

# =============================================================================
# Request
# =============================================================================

#: A coordinate, as a number or a numeric string.
NumberString = int | float | str

#: Accepted shapes for a time-machine ``time``: epoch seconds, a date
#: string, or a date/datetime object.
TimeMachineDate = int | float | str | datetime | date


class Exclude(StrEnum):
    """Data blocks that can be left out of a response."""

    CURRENTLY = "currently"
    MINUTELY = "minutely"
    HOURLY = "hourly"
    DAILY = "daily"
    ALERTS = "alerts"
    FLAGS = "flags"


#: All of the time based data blocks.
EXCLUDE_ALL = (Exclude.CURRENTLY, Exclude.DAILY, Exclude.MINUTELY, Exclude.HOURLY)

#: Exclude every time block except ``currently``.
ONLY_CURRENTLY = tuple(x for x in EXCLUDE_ALL if x is not Exclude.CURRENTLY)

#: Exclude every time block except ``minutely``.
ONLY_MINUTELY = tuple(x for x in EXCLUDE_ALL if x is not Exclude.MINUTELY)

#: Exclude every time block except ``hourly``.
ONLY_HOURLY = tuple(x for x in EXCLUDE_ALL if x is not Exclude.HOURLY)

#: Exclude every time block except ``daily``.
ONLY_DAILY = tuple(x for x in EXCLUDE_ALL if x is not Exclude.DAILY)


class Units(StrEnum):
    """Unit systems for the response."""

    AUTO = "auto"  # picked from the location
    CA = "ca"  # SI, wind in km/h
    UK = "uk2"  # SI, distances in miles and wind in mph
    US = "us"
    SI = "si"


class Extend(StrEnum):
    """Values for the ``extend`` query parameter."""

    HOURLY = "hourly"  # 168 hours instead of 48


class Language(StrEnum):
    """Languages for text summaries."""

    ARABIC = "ar"
    AZERBAIJANI = "az"
    BELARUSIAN = "be"
    BULGARIAN = "bg"
    BENGALI = "bn"
    BOSNIAN = "bs"
    CATALAN = "ca"
    CZECH = "cs"
    DANISH = "da"
    GERMAN = "de"
    GREEK = "el"
    ENGLISH = "en"
    ESPERANTO = "eo"
    SPANISH = "es"
    ESTONIAN = "et"
    FINNISH = "fi"
    FRENCH = "fr"
    HEBREW = "he"
    HINDI = "hi"
    CROATIAN = "hr"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ICELANDIC = "is"
    ITALIAN = "it"
    JAPANESE = "ja"
    GEORGIAN = "ka"
    KANNADA = "kn"
    KOREAN = "ko"
    CORNISH = "kw"
    LATVIAN = "lv"
    MALAYAM = "ml"
    MARATHI = "mr"
    NORWEGIAN_BOKMAL = "nb"
    DUTCH = "nl"
    NORWEGIAN = "no"
    PUNJABI = "pa"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SERBIAN = "sr"
    SWEDISH = "sv"
    TAMIL = "ta"
    TELUGU = "te"
    TETUM = "tet"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    URDU = "ur"
    PIG_LATIN = "x-pig-latin"
    CHINESE = "zh"
    CHINESE_TRADITIONAL = "zh-tw"


class RequestParams(TypedDict, total=False):
    """Optional query parameters. Keys set to None are left out of the URL."""

    exclude: list[Exclude] | None
    lang: Language | None
    units: Units | None
    extend: Extend | None


@dataclass
class ForecastRequest:
    """Location, and optionally the time, of a forecast request."""

    latitude: NumberString | None
    longitude: NumberString | None
    time: TimeMachineDate | None = None


# =============================================================================
# Response
# =============================================================================


class WeatherIcon(StrEnum):
    """Icon names the API may return."""

    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    RAIN = "rain"
    SNOW = "snow"
    SLEET = "sleet"
    WIND = "wind"
    FOG = "fog"
    CLOUDY = "cloudy"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"
    TORNADO = "tornado"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> WeatherIcon | None:
        # Unrecognized icon names read as UNKNOWN.
        if isinstance(value, str):
            return cls.UNKNOWN
        return None


Icon = Annotated[WeatherIcon, BeforeValidator(WeatherIcon)]


class Severity(StrEnum):
    """How seriously an alert should be taken."""

    ADVISORY = "advisory"
    WATCH = "watch"
    WARNING = "warning"


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class DataPoint(_ApiModel):
    """Weather conditions at one point in time. Every reading is optional."""

    time: int
    summary: str | None = None
    icon: Icon | None = None
    apparent_temperature: float | None = None
    apparent_temperature_high: float | None = None
    apparent_temperature_high_time: int | None = None
    apparent_temperature_low: float | None = None
    apparent_temperature_low_time: int | None = None
    apparent_temperature_max: float | None = None
    apparent_temperature_max_time: int | None = None
    apparent_temperature_min: float | None = None
    apparent_temperature_min_time: int | None = None
    cloud_cover: float | None = None
    dew_point: float | None = None
    humidity: float | None = None
    moon_phase: float | None = None
    nearest_storm_bearing: float | None = None
    nearest_storm_distance: float | None = None
    ozone: float | None = None
    precip_accumulation: float | None = None
    precip_intensity: float | None = None
    precip_intensity_error: float | None = None
    precip_intensity_max: float | None = None
    precip_intensity_max_time: int | None = None
    precip_probability: float | None = None
    precip_type: str | None = None
    pressure: float | None = None
    sunrise_time: int | None = None
    sunset_time: int | None = None
    temperature: float | None = None
    temperature_high: float | None = None
    temperature_high_time: int | None = None
    temperature_low: float | None = None
    temperature_low_time: int | None = None
    temperature_max: float | None = None
    temperature_max_time: int | None = None
    temperature_min: float | None = None
    temperature_min_time: int | None = None
    uv_index: int | None = None
    uv_index_time: int | None = None
    visibility: float | None = None
    wind_bearing: float | None = None
    wind_gust: float | None = None
    wind_gust_time: int | None = None
    wind_speed: float | None = None


class DataBlock(_ApiModel):
    """A summary plus the data points for one cadence (minute, hour, day)."""

    summary: str | None = None
    icon: Icon | None = None
    data: list[DataPoint] = Field(default_factory=list)


class Alert(_ApiModel):
    """A severe weather alert issued for the requested location."""

    title: str
    description: str | None = None
    expires: int | None = None
    regions: list[str] = Field(default_factory=list)
    severity: Severity | None = None
    time: int | None = None
    uri: str | None = None


class Flags(_ApiModel):
    """Metadata about how the request was served."""

    units: str | None = None
    sources: list[str] = Field(default_factory=list)
    nearest_station: float | None = Field(default=None, alias="nearest-station")


class ResponseHeaders(BaseModel):
    """Transport headers attached to a forecast. Names are lower-cased."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    api_calls: str | None = Field(default=None, alias="x-forecast-api-calls")
    response_time: str | None = Field(default=None, alias="x-response-time")


class Forecast(_ApiModel):
    """A forecast or time-machine response."""

    latitude: float
    longitude: float
    timezone: str
    offset: float | None = None
    currently: DataPoint | None = None
    minutely: DataBlock | None = None
    hourly: DataBlock | None = None
    daily: DataBlock | None = None
    alerts: list[Alert] | None = None
    flags: Flags | None = None
    headers: ResponseHeaders = Field(default_factory=ResponseHeaders)

    @classmethod
    def from_response(cls, body: dict[str, Any], headers: dict[str, str]) -> Forecast:
        """Validate a decoded body merged with its response headers."""
        return cls.model_validate({**body, "headers": headers})


class CurrentForecast(Forecast):
    """Forecast with the ``currently`` data point."""

    currently: DataPoint


class WeekForecast(Forecast):
    """Forecast with the ``daily`` data block."""

    daily: DataBlock


class DayForecast(Forecast):
    """Forecast with the ``hourly`` data block."""

    hourly: DataBlock


class HourForecast(Forecast):
    """Forecast with the ``minutely`` data block."""

    minutely: DataBlock
