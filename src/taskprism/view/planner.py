# SPDX-License-Identifier: MIT

from typing import Sequence

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskprism.model.projection import Assignee
from taskprism.model.task import Task
from taskprism.service.projection import tasks_for_assignee_on_day
from taskprism.service.status import status_display
from taskprism.view.header import header


def planner_view(
    console: Console,
    title: str,
    people: Sequence[Assignee],
    tasks: Sequence[Task],
    days: Sequence[pendulum.DateTime],
) -> None:
    """Print one row per assignee with their tasks on each day of the week."""
    header(console, "planner", title)

    if not people:
        console.print("\n[dim]No assigned tasks to display[/dim]\n")
        return

    table = Table(box=box.SIMPLE, show_lines=True)
    table.add_column("assignee")
    for day in days:
        table.add_column(day.format("ddd DD"), vertical="top")

    for person in people:
        cells: list[Text | str] = [person["name"]]
        for day in days:
            cell = Text()
            for task in tasks_for_assignee_on_day(tasks, person["id"], day):
                if cell.plain:
                    cell.append("\n")
                cell.append(
                    f"#{task['id']}", style=status_display(task["status"])["color"]
                )
            cells.append(cell)
        table.add_row(*cells)

    console.print(table)
