# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskprism.model.task import Task
from taskprism.model.task_status import TaskStatus
from taskprism.service.status import days_remaining, status_display
from taskprism.time import datetime_to_display_date_str_optional
from taskprism.view.header import header
from taskprism.view.util import format_days_remaining, styled


def status_summary_view(
    console: Console,
    title: str,
    counts: dict[str, int],
    by_month: dict[int, list[Task]],
) -> None:
    """Print status totals and a per-month breakdown of task starts."""
    header(console, "summary", title)

    totals = Table(box=box.SIMPLE)
    totals.add_column("status")
    totals.add_column("tasks", justify="right")
    for status, count in counts.items():
        display = status_display(status)
        totals.add_row(styled(display), str(count))
    totals.add_row(Text("Total", style="bold"), str(sum(counts.values())))
    console.print(totals)

    months = Table(box=box.SIMPLE)
    months.add_column("month")
    months.add_column("tasks", justify="right")
    for status in (TaskStatus.OPEN, TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED):
        months.add_column(status_display(status)["label"], justify="right")
    for month, month_tasks in by_month.items():
        months.add_row(
            pendulum.datetime(2000, month, 1).format("MMMM"),
            str(len(month_tasks)),
            *[
                str(sum(1 for task in month_tasks if task["status"] == status))
                for status in (
                    TaskStatus.OPEN,
                    TaskStatus.IN_PROGRESS,
                    TaskStatus.COMPLETED,
                )
            ],
        )
    console.print(months)


def overdue_view(
    console: Console, title: str, tasks: list[Task], today: pendulum.DateTime
) -> None:
    """Print tasks that would be flagged overdue as of today."""
    header(console, "overdue", title)

    if not tasks:
        console.print("\n[dim]No overdue tasks[/dim]\n")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("id")
    table.add_column("title")
    table.add_column("status")
    table.add_column("end")
    table.add_column("remaining")
    for task in tasks:
        display = status_display(task["status"])
        table.add_row(
            str(task["id"]),
            task["title"],
            styled(display),
            datetime_to_display_date_str_optional(task["end_date"]) or "",
            format_days_remaining(days_remaining(task, today)),
        )
    console.print(table)
