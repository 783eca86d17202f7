# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import typer

from taskprism.logger import LOG_LEVELS


def validate_month(month: Optional[int]) -> Optional[int]:
    if month is None:
        return None
    if not (1 <= month <= 12):
        raise typer.BadParameter("Month must be between 1 and 12 (inclusive)")
    return month


def validate_week(week: int) -> int:
    if week < 0:
        raise typer.BadParameter("Week must be 0 (whole month) or a week number")
    return week


def validate_timezone(timezone: Optional[str]) -> Optional[str]:
    if timezone is None:
        return None
    try:
        pendulum.timezone(timezone)
    except (KeyError, ValueError) as e:
        raise typer.BadParameter(f"Unknown timezone '{timezone}': {e}")
    return timezone


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of {', '.join(LOG_LEVELS)}")
    return log_level.upper()


def validate_threshold(threshold: Optional[float]) -> Optional[float]:
    if threshold is None:
        return None
    if not (0 <= threshold <= 100):
        raise typer.BadParameter("Threshold must be between 0 and 100 (inclusive)")
    return threshold
