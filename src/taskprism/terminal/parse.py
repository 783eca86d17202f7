# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from taskprism.repository.configuration import CONFIGURATION_REPO
from taskprism.time import datetime_from_str


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Parse a date option in the configured timezone.

    Accepts YYYY-MM-DD (with optional time), now, today, yesterday,
    tomorrow, or a day offset relative to today like 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param)
    tz = CONFIGURATION_REPO.get_config()["timezone"]

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", date):
        try:
            return datetime_from_str(date, tz)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return pendulum.today(tz).add(days=int(date))

    if date == "now" or date == "n":
        return pendulum.now(tz)
    if date == "today" or date == "t":
        return pendulum.today(tz)
    if date == "yesterday" or date == "y":
        return pendulum.yesterday(tz)
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow(tz)
    raise typer.BadParameter("Incorrect date format")


def parse_id_list(id_param: str) -> list[int]:
    """
    Parse a single ID, comma-separated list of IDs, or ranges of IDs.

    Args:
        id_param: A single ID (e.g., "1"), comma-separated list (e.g., "1,2,3"),
                  range (e.g., "1-5"), or mixed (e.g., "1,3-5,8")

    Returns:
        List of integer IDs (sorted and deduplicated)

    Raises:
        typer.BadParameter: If any ID is not a valid integer or range format is invalid
    """
    id_strings = [s.strip() for s in id_param.split(",")]

    ids: list[int] = []
    for id_str in id_strings:
        if not id_str:
            continue

        if "-" in id_str:
            range_parts = id_str.split("-")
            if len(range_parts) != 2:
                raise typer.BadParameter(
                    f"Invalid range format: '{id_str}' (expected format: 'start-end')"
                )

            try:
                start = int(range_parts[0].strip())
                end = int(range_parts[1].strip())
            except ValueError:
                raise typer.BadParameter(
                    f"Invalid range: '{id_str}' contains non-integer values"
                )

            if start > end:
                raise typer.BadParameter(
                    f"Invalid range: '{id_str}' (start must be <= end)"
                )

            ids.extend(range(start, end + 1))
        else:
            try:
                ids.append(int(id_str))
            except ValueError:
                raise typer.BadParameter(
                    f"Invalid ID: '{id_str}' is not a valid integer"
                )

    if len(ids) == 0:
        raise typer.BadParameter("No valid IDs provided")

    return sorted(set(ids))
