# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from taskprism.model.projection import ColumnLayout
from taskprism.model.task import Task
from taskprism.model.window import Window
from taskprism.repository.configuration import CONFIGURATION_REPO
from taskprism.repository.task import SnapshotError, TaskRepository
from taskprism.service.gantt import gantt_rows
from taskprism.service.hierarchy import parent_ids
from taskprism.service.projection import (
    assignees,
    calendar_grid,
    tasks_by_month,
    tasks_in_month,
)
from taskprism.service.status import (
    find_overdue,
    group_by_column,
    resolve_layouts,
    status_counts,
)
from taskprism.service.window import days_in_window, make_window
from taskprism.terminal.parse import parse_date, parse_id_list
from taskprism.terminal.validate import validate_month, validate_week
from taskprism.time import now_in, today_in
from taskprism.view.calendar import calendar_window_view
from taskprism.view.gantt import gantt_rows_view
from taskprism.view.kanban import kanban_view
from taskprism.view.planner import planner_view
from taskprism.view.summary import overdue_view, status_summary_view

logger = logging.getLogger(__name__)

SnapshotArgument = Annotated[
    Path,
    typer.Argument(
        help="Task snapshot file (YAML or JSON, camelCase task fields)",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]
YearArgument = Annotated[int, typer.Argument(help="Calendar year")]
MonthArgument = Annotated[
    int, typer.Argument(callback=validate_month, help="Month, 1-12")
]
WeekOption = Annotated[
    int,
    typer.Option(
        "--week",
        "-w",
        callback=validate_week,
        help="Display week of the month (1-6); 0 shows the whole month",
    ),
]


def _load_tasks(snapshot: Path) -> list[Task]:
    tz = CONFIGURATION_REPO.get_config()["timezone"]
    try:
        return TaskRepository(snapshot, tz).get_all_tasks()
    except SnapshotError as e:
        Console(stderr=True).print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)


def _window(year: int, month: int, week: int) -> Window:
    try:
        return make_window(year, month, week)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def _window_title(window: Window) -> str:
    title = pendulum.datetime(window["year"], window["month"], 1).format("MMMM YYYY")
    if window["week"]:
        title += f", week {window['week']}"
    return title


def window(
    snapshot: SnapshotArgument,
    year: YearArgument,
    month: MonthArgument,
    week: WeekOption = 0,
) -> None:
    """Show the days of a month or week window and the tasks on each day."""
    tz = CONFIGURATION_REPO.get_config()["timezone"]
    tasks = _load_tasks(snapshot)
    selected = _window(year, month, week)
    days = days_in_window(selected, tz)
    calendar_window_view(
        Console(), _window_title(selected), calendar_grid(tasks, days, month)
    )


def gantt(
    snapshot: SnapshotArgument,
    year: YearArgument,
    month: MonthArgument,
    week: WeekOption = 0,
    expand: Annotated[
        Optional[str],
        typer.Option(
            "--expand",
            "-x",
            help="Parent task ids whose subtasks are shown, e.g. 1,3-5",
        ),
    ] = None,
    expand_all: Annotated[
        bool, typer.Option("--expand-all", "-X", help="Show every subtask")
    ] = False,
    now: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--now",
            "-n",
            parser=parse_date,
            help="Reference time for progress (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
        ),
    ] = None,
    layout: Annotated[
        Optional[str],
        typer.Option("--layout", "-l", help="Column layout used for status columns"),
    ] = None,
    only_visible: Annotated[
        bool,
        typer.Option("--only-visible", "-v", help="Hide tasks outside the window"),
    ] = False,
) -> None:
    """Show the flattened task hierarchy with progress and bar geometry."""
    config = CONFIGURATION_REPO.get_config()
    tasks = _load_tasks(snapshot)
    selected = _window(year, month, week)
    days = days_in_window(selected, config["timezone"])

    expanded_ids: frozenset[int] = frozenset()
    if expand_all:
        expanded_ids = frozenset(parent_ids(tasks))
    elif expand is not None:
        expanded_ids = frozenset(parse_id_list(expand))

    rows = gantt_rows(
        tasks,
        days,
        expanded_ids,
        now if now is not None else now_in(config["timezone"]),
        layout=_layout(layout),
        milestone_threshold_percent=config["milestone_threshold_percent"],
        only_visible=only_visible,
    )
    gantt_rows_view(Console(), _window_title(selected), rows)


def _layout(name: Optional[str]) -> ColumnLayout:
    config = CONFIGURATION_REPO.get_config()
    try:
        layouts = resolve_layouts(config.get("column_layouts"))
    except ValueError as e:
        Console(stderr=True).print(
            f"[red]Invalid column layout configuration: {e}[/red]"
        )
        raise typer.Exit(code=1)
    layout_name = name or config["default_column_layout"]
    if layout_name not in layouts:
        raise typer.BadParameter(
            f"Unknown layout '{layout_name}', choose from {', '.join(layouts)}"
        )
    return layouts[layout_name]


def kanban(
    snapshot: SnapshotArgument,
    layout: Annotated[
        Optional[str],
        typer.Option("--layout", "-l", help="Column layout, e.g. full or compact"),
    ] = None,
    year: Annotated[
        Optional[int], typer.Option("--year", "-y", help="Limit to this year")
    ] = None,
    month: Annotated[
        Optional[int],
        typer.Option(
            "--month",
            "-m",
            callback=validate_month,
            help="Limit to tasks starting or ending in this month (needs --year)",
        ),
    ] = None,
) -> None:
    """Group tasks into board columns by status."""
    selected_layout = _layout(layout)
    tasks = _load_tasks(snapshot)
    title = selected_layout["name"]
    if month is not None:
        if year is None:
            raise typer.BadParameter("--month requires --year")
        tasks = tasks_in_month(tasks, year, month)
        title = f"{title}, {_window_title(make_window(year, month))}"
    kanban_view(
        Console(), title, selected_layout, group_by_column(tasks, selected_layout)
    )


def planner(
    snapshot: SnapshotArgument,
    year: YearArgument,
    month: MonthArgument,
    week: Annotated[
        int,
        typer.Option(
            "--week",
            "-w",
            callback=validate_week,
            help="Display week of the month (1-6)",
        ),
    ] = 1,
) -> None:
    """Show each assignee's tasks across the days of one week."""
    tz = CONFIGURATION_REPO.get_config()["timezone"]
    tasks = _load_tasks(snapshot)
    selected = _window(year, month, max(week, 1))
    days = days_in_window(selected, tz)
    planner_view(Console(), _window_title(selected), assignees(tasks), tasks, days)


def overdue(
    snapshot: SnapshotArgument,
    today: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--today",
            "-t",
            parser=parse_date,
            help="Reference day (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
        ),
    ] = None,
) -> None:
    """List tasks past their end date that are not yet flagged overdue."""
    tz = CONFIGURATION_REPO.get_config()["timezone"]
    tasks = _load_tasks(snapshot)
    reference = today if today is not None else today_in(tz)
    candidates = find_overdue(tasks, reference)
    logger.debug("%d of %d tasks are overdue", len(candidates), len(tasks))
    overdue_view(Console(), reference.format("YYYY-MM-DD"), candidates, reference)


def summary(
    snapshot: SnapshotArgument,
    year: Annotated[
        Optional[int],
        typer.Option("--year", "-y", help="Year for the monthly breakdown"),
    ] = None,
) -> None:
    """Show task totals per status and per month."""
    tz = CONFIGURATION_REPO.get_config()["timezone"]
    tasks = _load_tasks(snapshot)
    selected_year = year if year is not None else today_in(tz).year
    status_summary_view(
        Console(),
        str(selected_year),
        status_counts(tasks),
        tasks_by_month(tasks, selected_year),
    )
