# SPDX-License-Identifier: MIT

from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from taskprism.model.projection import ColumnLayout
from taskprism.model.task import Task
from taskprism.service.status import status_display, task_type_display
from taskprism.view.header import header


def kanban_view(
    console: Console,
    title: str,
    layout: ColumnLayout,
    columns: dict[str, list[Task]],
) -> None:
    """Print one panel per layout column with the tasks bucketed into it."""
    header(console, "kanban", title)

    panels = []
    for column in layout["columns"]:
        display = status_display(column)
        column_tasks = columns.get(column, [])
        body = Text()
        if not column_tasks:
            body.append("no tasks", style="dim")
        for index, task in enumerate(column_tasks):
            if index > 0:
                body.append("\n")
            type_display = task_type_display(task["task_type"])
            body.append(f"{type_display['label'].upper()} ", style=type_display["color"])
            body.append(f"#{task['id']} {task['title']}")
        panels.append(
            Panel(
                body,
                title=f"[{display['color']}]{display['label']}[/] ({len(column_tasks)})",
                width=32,
            )
        )

    console.print(Columns(panels))
