"""Dark Sky API client - forecast and time-machine requests with typed responses.

Architecture::

    date_utils.py   Time-machine times -> ``YYYY-MM-DDTHH:mm:ssZZ``
    query.py        Request params -> query string
    client.py       URL building and the GET (DarkSkyClient)
    chain.py        Fluent request builder (RequestChain)
    darksky.py      Wrapper with defaults and current/week/day/hour shortcuts
    schemas.py      Request enums and pydantic response models
    services/       Shared HTTP session (default timeout, no retry)
    config.py       Settings for the CLI
    cli.py          ``darksky-api`` command

Data flow: RequestChain -> DarkSkyClient -> (date_utils, query) -> HTTP -> Forecast
"""

__version__ = "0.1.0"

from darksky_api.chain import DarkSkyOptions, RequestChain, create_request_chain
from darksky_api.client import API_BASE, DarkSkyClient, create_client
from darksky_api.darksky import DarkSky
from darksky_api.date_utils import DARKSKY_DATE_FORMAT, format_date
from darksky_api.errors import (
    DarkSkyError,
    HTTPException,
    InvalidDate,
    MissingCoordinates,
    MissingTime,
    NotFound,
)
from darksky_api.schemas import (
    EXCLUDE_ALL,
    ONLY_CURRENTLY,
    ONLY_DAILY,
    ONLY_HOURLY,
    ONLY_MINUTELY,
    CurrentForecast,
    DayForecast,
    Exclude,
    Extend,
    Forecast,
    ForecastRequest,
    HourForecast,
    Language,
    RequestParams,
    Units,
    WeekForecast,
)

__all__ = [
    "API_BASE",
    "DARKSKY_DATE_FORMAT",
    "EXCLUDE_ALL",
    "ONLY_CURRENTLY",
    "ONLY_DAILY",
    "ONLY_HOURLY",
    "ONLY_MINUTELY",
    "CurrentForecast",
    "DarkSky",
    "DarkSkyClient",
    "DarkSkyError",
    "DarkSkyOptions",
    "DayForecast",
    "Exclude",
    "Extend",
    "Forecast",
    "ForecastRequest",
    "HTTPException",
    "HourForecast",
    "InvalidDate",
    "Language",
    "MissingCoordinates",
    "MissingTime",
    "NotFound",
    "RequestChain",
    "RequestParams",
    "Units",
    "WeekForecast",
    "__version__",
    "create_client",
    "create_request_chain",
    "format_date",
]
