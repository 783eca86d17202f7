# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional, cast

import pendulum

DEFAULT_TIMEZONE = "UTC"


def now_in(tz: str = DEFAULT_TIMEZONE) -> pendulum.DateTime:
    return pendulum.now(tz)


def today_in(tz: str = DEFAULT_TIMEZONE) -> pendulum.DateTime:
    return pendulum.now(tz).start_of("day")


def calendar_days_between(
    start: pendulum.DateTime, end: pendulum.DateTime
) -> int:
    """Whole calendar days from start to end, ignoring time of day.

    Negative when end falls on an earlier calendar date than start.
    """
    return end.toordinal() - start.toordinal()


def datetime_from_str(datetime: str, tz: str = DEFAULT_TIMEZONE) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime, tz=tz))


def datetime_from_value_lenient(
    value: Any, tz: str = DEFAULT_TIMEZONE
) -> Optional[pendulum.DateTime]:
    """
    Convert a raw snapshot value to a pendulum.DateTime in the given zone.

    Accepts ISO date or datetime strings and date/datetime objects (YAML
    decodes unquoted dates itself). Naive values are read as wall time in tz,
    values with an offset are converted to tz. Anything that is not a full
    calendar date (time-only, durations, intervals, "now") is treated as
    absent and None is returned.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz=tz).in_timezone(tz)
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day, tz=tz)
    if not isinstance(value, str) or value.strip().lower() == "now":
        return None
    try:
        parsed = pendulum.parse(value, exact=True, tz=tz)
    except ValueError:
        return None
    if isinstance(parsed, pendulum.DateTime):
        return parsed.in_timezone(tz)
    if isinstance(parsed, pendulum.Date):
        return pendulum.datetime(parsed.year, parsed.month, parsed.day, tz=tz)
    return None


def datetime_to_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD")


def datetime_to_date_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_date_str(datetime)


def datetime_to_display_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD ddd")


def datetime_to_display_date_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_date_str(datetime)
