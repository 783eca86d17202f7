# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskprism.model.projection import CalendarCell
from taskprism.service.status import status_display
from taskprism.view.header import header

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def calendar_window_view(
    console: Console, title: str, weeks: list[list[CalendarCell]]
) -> None:
    """Print the window as a Monday-first grid with the tasks of each day."""
    header(console, "window", title)

    if not weeks:
        console.print("\n[dim]Window contains no days[/dim]\n")
        return

    table = Table(box=box.SQUARE, show_lines=True, expand=True)
    for name in WEEKDAY_NAMES[: len(weeks[0])]:
        table.add_column(name, vertical="top", ratio=1)

    for week in weeks:
        cells = []
        for cell in week:
            text = Text(cell["day"].format("DD"), style="bold" if cell["in_month"] else "dim")
            for task in cell["tasks"]:
                text.append("\n")
                text.append(
                    f"#{task['id']} {task['title']}",
                    style=status_display(task["status"])["color"],
                )
            cells.append(text)
        table.add_row(*cells)

    console.print(table)
