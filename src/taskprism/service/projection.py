# SPDX-License-Identifier: MIT

from typing import Optional, Sequence, TypeVar

import pendulum

from taskprism.model.projection import Assignee, CalendarCell
from taskprism.model.task import Task, TaskView
from taskprism.service.window import DAYS_PER_WEEK, week_key

T = TypeVar("T", bound=TaskView)


def task_bounds(
    task: TaskView,
) -> Optional[tuple[pendulum.DateTime, pendulum.DateTime]]:
    """
    The task's normalized [start 00:00, end 23:59:59.999999] interval.

    Returns None when either date is absent (missing or unparseable).
    An inverted interval is returned as is; it intersects nothing.
    """
    if task["start_date"] is None or task["end_date"] is None:
        return None
    return task["start_date"].start_of("day"), task["end_date"].end_of("day")


def overlaps(
    task: TaskView, range_start: pendulum.DateTime, range_end: pendulum.DateTime
) -> bool:
    """Check whether the task's days intersect [range_start, range_end]."""
    bounds = task_bounds(task)
    if bounds is None:
        return False
    task_start, task_end = bounds
    if task_end < task_start:
        return False
    return task_start <= range_end and task_end >= range_start


def is_on_day(task: TaskView, day: pendulum.DateTime) -> bool:
    return overlaps(task, day.start_of("day"), day.end_of("day"))


def tasks_on_day(tasks: Sequence[T], day: pendulum.DateTime) -> list[T]:
    """Tasks whose inclusive [start_date, end_date] contains the given day."""
    return [task for task in tasks if is_on_day(task, day)]


def tasks_by_day(
    tasks: Sequence[T], days: Sequence[pendulum.DateTime]
) -> list[tuple[pendulum.DateTime, list[T]]]:
    return [(day, tasks_on_day(tasks, day)) for day in days]


def calendar_grid(
    tasks: Sequence[Task], days: Sequence[pendulum.DateTime], month: int
) -> list[list[CalendarCell]]:
    """
    Split the window's days into Monday-first weeks of calendar cells.

    Cells of days outside the requested month are flagged so that callers can
    dim them.
    """
    weeks: list[list[CalendarCell]] = []
    for offset in range(0, len(days), DAYS_PER_WEEK):
        week: list[CalendarCell] = []
        for day in days[offset : offset + DAYS_PER_WEEK]:
            week.append(
                {
                    "day": day,
                    "in_month": day.month == month,
                    "tasks": tasks_on_day(tasks, day),
                }
            )
        weeks.append(week)
    return weeks


def tasks_in_month(tasks: Sequence[Task], year: int, month: int) -> list[Task]:
    """Tasks whose start or end date falls in the given month."""
    result = []
    for task in tasks:
        for date in (task["start_date"], task["end_date"]):
            if date is not None and date.year == year and date.month == month:
                result.append(task)
                break
    return result


def tasks_by_month(tasks: Sequence[Task], year: int) -> dict[int, list[Task]]:
    """Tasks of the year keyed by the month (1-12) of their start date."""
    by_month: dict[int, list[Task]] = {month: [] for month in range(1, 13)}
    for task in tasks:
        start = task["start_date"]
        if start is not None and start.year == year:
            by_month[start.month].append(task)
    return by_month


def tasks_by_week(tasks: Sequence[Task]) -> dict[str, list[Task]]:
    """Tasks keyed by the YYYY-MM-Wnn display week of their start date."""
    by_week: dict[str, list[Task]] = {}
    for task in tasks:
        start = task["start_date"]
        if start is None:
            continue
        by_week.setdefault(week_key(start), []).append(task)
    return by_week


def assignees(tasks: Sequence[Task]) -> list[Assignee]:
    """Unique assignees in order of first appearance across the tasks."""
    seen: dict[int, Assignee] = {}
    for task in tasks:
        names = task["assignee_names"]
        for index, assignee_id in enumerate(task["assignee_ids"]):
            if assignee_id in seen:
                continue
            name = names[index] if index < len(names) else "Unknown"
            seen[assignee_id] = {"id": assignee_id, "name": name}
    return list(seen.values())


def tasks_for_assignee_on_day(
    tasks: Sequence[Task], assignee_id: int, day: pendulum.DateTime
) -> list[Task]:
    return [
        task
        for task in tasks
        if assignee_id in task["assignee_ids"] and is_on_day(task, day)
    ]


def span_indices(task: TaskView, days: Sequence[pendulum.DateTime]) -> list[int]:
    """Indices of the days a task covers, used by the per-assignee week planner."""
    return [index for index, day in enumerate(days) if is_on_day(task, day)]
