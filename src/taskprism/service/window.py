# SPDX-License-Identifier: MIT

import pendulum

from taskprism.model.window import Window
from taskprism.time import DEFAULT_TIMEZONE

DAYS_PER_WEEK = 7


def make_window(year: int, month: int, week: int = 0) -> Window:
    """
    Build a validated window descriptor.

    Args:
        year: Calendar year
        month: Month of the year, 1-12
        week: 0 for the whole month, N >= 1 for the Nth display week

    Raises:
        ValueError: If month or week is out of range
    """
    if not (1 <= month <= 12):
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    if week < 0:
        raise ValueError(f"Week must be 0 or a positive week number, got {week}")
    return {"year": year, "month": month, "week": week}


def days_between(
    start: pendulum.DateTime, end: pendulum.DateTime
) -> list[pendulum.DateTime]:
    """Every calendar day from start through end, inclusive, at 00:00."""
    current = start.start_of("day")
    last = end.start_of("day")
    days: list[pendulum.DateTime] = []
    while current <= last:
        days.append(current)
        current = current.add(days=1)
    return days


def month_display_bounds(
    year: int, month: int, tz: str = DEFAULT_TIMEZONE
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    The Monday on or before the 1st and the Sunday on or after the last day.

    Both bounds are returned at 00:00 of their day.
    """
    month_start = pendulum.datetime(year, month, 1, tz=tz)
    display_start = month_start.start_of("week")
    display_end = month_start.end_of("month").end_of("week").start_of("day")
    return display_start, display_end


def month_window_days(
    year: int, month: int, tz: str = DEFAULT_TIMEZONE
) -> list[pendulum.DateTime]:
    display_start, display_end = month_display_bounds(year, month, tz)
    return days_between(display_start, display_end)


def week_window_days(
    year: int, month: int, week: int, tz: str = DEFAULT_TIMEZONE
) -> list[pendulum.DateTime]:
    """
    The Nth (1-indexed) Monday to Sunday week counted from the month's first
    display week. Weeks past the end of the month keep counting forward.
    """
    display_start, _ = month_display_bounds(year, month, tz)
    week_start = display_start.add(weeks=week - 1)
    return days_between(week_start, week_start.add(days=DAYS_PER_WEEK - 1))


def days_in_window(window: Window, tz: str = DEFAULT_TIMEZONE) -> list[pendulum.DateTime]:
    week = window.get("week", 0) or 0
    if week <= 0:
        return month_window_days(window["year"], window["month"], tz)
    return week_window_days(window["year"], window["month"], week, tz)


def weeks_in_month(year: int, month: int) -> int:
    """Number of display weeks (rows of a Monday-first month grid)."""
    return len(month_window_days(year, month)) // DAYS_PER_WEEK


def week_of_month(day: pendulum.DateTime) -> int:
    """1-indexed display week of the day within its own month."""
    first_weekday = day.start_of("month").isoweekday()
    return (day.day + first_weekday - 2) // DAYS_PER_WEEK + 1


def week_key(day: pendulum.DateTime) -> str:
    return f"{day.year}-{day.month:02d}-W{week_of_month(day):02d}"
