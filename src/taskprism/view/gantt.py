# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskprism.model.projection import GanttRow
from taskprism.time import datetime_to_date_str_optional
from taskprism.view.header import header
from taskprism.view.util import format_days_remaining, format_percent, task_title


def gantt_rows_view(console: Console, title: str, rows: list[GanttRow]) -> None:
    """Print the projected Gantt rows: hierarchy, status and bar geometry."""
    header(console, "gantt", title)

    if not rows:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("id")
    table.add_column("title")
    table.add_column("status")
    table.add_column("progress", justify="right")
    table.add_column("start")
    table.add_column("end")
    table.add_column("remaining")
    table.add_column("days", justify="right")
    table.add_column("left", justify="right")
    table.add_column("width", justify="right")
    table.add_column("bar")

    for row in rows:
        item = row["item"]
        span = row["span"]
        if span["is_visible"]:
            days = f"{span['start_index']}-{span['end_index']}"
            left = format_percent(span["left_percent"])
            width = format_percent(span["width_percent"])
            bar = "milestone" if row["is_milestone"] else "bar"
        else:
            days, left, width, bar = "", "", "", "hidden"

        table.add_row(
            str(item["id"]),
            task_title(item, row["level"]),
            Text(row["display"]["label"], style=row["display"]["color"]),
            f"{row['progress']}%",
            datetime_to_date_str_optional(item["start_date"]) or "",
            datetime_to_date_str_optional(item["end_date"]) or "",
            format_days_remaining(row["days_remaining"]),
            days,
            left,
            width,
            Text(bar, style="dim" if bar == "hidden" else ""),
        )

    console.print(table)
