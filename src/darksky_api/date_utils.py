"""Formatting of time-machine times.

The API takes ``[YYYY]-[MM]-[DD]T[HH]:[MM]:[SS][+-HHMM]``. Callers may pass
epoch seconds (as a number or numeric string), a date string, or a
``date``/``datetime``. Naive values are taken as UTC.
"""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, time, timedelta
from functools import singledispatch
from typing import TYPE_CHECKING

from dateutil import parser as date_parser

from darksky_api.errors import bad_request

if TYPE_CHECKING:
    from darksky_api.schemas import TimeMachineDate

#: ``strptime`` pattern for reading formatted times back, e.g. ``2019-01-01T00:00:00+0000``.
DARKSKY_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def is_number(value: object) -> bool:
    """Whether ``value`` is a finite number or a string holding one."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int | float):
        return math.isfinite(value)
    if isinstance(value, str):
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False
    return False


@singledispatch
def format_date(value: object) -> str:
    """
    Format a time-machine time the way the API expects.

    Args:
        value: Epoch seconds, numeric string, date string, ``date`` or ``datetime``.

    Returns:
        The time as ``YYYY-MM-DDTHH:MM:SS+HHMM`` with a four digit year.

    Raises:
        InvalidDate: If ``value`` can't be read as a timestamp.
    """
    msg = f"{value!r} is not a valid date."
    raise bad_request(msg)


@format_date.register
def _(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    # %Y is not zero-padded below year 1000 on every platform.
    return f"{value.year:04d}-{value:%m-%dT%H:%M:%S%z}"


@format_date.register
def _(value: date) -> str:
    return format_date(datetime.combine(value, time(), tzinfo=UTC))


@format_date.register
def _(value: bool) -> str:
    msg = f"{value!r} is not a valid date."
    raise bad_request(msg)


@format_date.register(int)
@format_date.register(float)
def _(value: float) -> str:
    try:
        target = EPOCH + timedelta(seconds=value)
    except (OverflowError, ValueError) as err:
        msg = f"{value!r} is not a valid timestamp."
        raise bad_request(msg) from err
    return format_date(target)


@format_date.register
def _(value: str) -> str:
    text = value.strip()
    if not text:
        msg = "An empty string is not a valid date."
        raise bad_request(msg)
    if is_number(text):
        return format_date(float(text) if "." in text or "e" in text.lower() else int(text))
    try:
        target = date_parser.parse(text)
    except (date_parser.ParserError, OverflowError, ValueError) as err:
        msg = f"'{value}' is not a valid date."
        raise bad_request(msg) from err
    return format_date(target)


def format_time_machine_time(value: TimeMachineDate | None) -> str | None:
    """Format ``value`` for the URL, or return None when there is no time."""
    if value is None:
        return None
    return format_date(value)
