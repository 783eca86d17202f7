# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskprism.model.task import TaskView
from taskprism.model.task_status import TaskStatus

IN_PROGRESS_FLOOR = 10
IN_PROGRESS_CEILING = 95
TESTING_DEFAULT = 85
TESTING_FLOOR = 80
POSTPONED_FLOOR = 20
POSTPONED_CEILING = 60


def subtask_completion(task: TaskView) -> Optional[int]:
    """Percentage of completed subtasks, or None when the task has none."""
    if task["kind"] != "task" or not task["subtasks"]:
        return None
    total = len(task["subtasks"])
    completed = sum(1 for subtask in task["subtasks"] if subtask.get("is_completed"))
    return round(100 * completed / total)


def elapsed_fraction(task: TaskView, now: pendulum.DateTime) -> Optional[float]:
    """
    Share of the task's span already behind now, within [0, 1].

    Uses the start of the start day and the end of the end day. None when a
    date is missing; an empty or inverted span counts as fully elapsed once
    now reaches the start.
    """
    if task["start_date"] is None or task["end_date"] is None:
        return None
    start = task["start_date"].start_of("day")
    end = task["end_date"].end_of("day")
    if now <= start:
        return 0.0
    if now >= end:
        return 1.0
    total_seconds = (end - start).total_seconds()
    if total_seconds <= 0:
        return 1.0
    return (now - start).total_seconds() / total_seconds


def _scaled(fraction: float, floor: int, ceiling: int) -> int:
    value = round(floor + fraction * (ceiling - floor))
    return max(floor, min(ceiling, value))


def progress(task: TaskView, now: pendulum.DateTime) -> int:
    """
    Presentation progress for a task bar, between 0 and 100.

    This is a display heuristic, not stored state; it depends on now and must
    be recomputed for every render.
    """
    status = task["status"]
    if status == TaskStatus.COMPLETED:
        return 100

    if status == TaskStatus.TESTING:
        completion = subtask_completion(task)
        if completion is None:
            return TESTING_DEFAULT
        return max(TESTING_FLOOR, completion)

    if status == TaskStatus.IN_PROGRESS:
        completion = subtask_completion(task)
        if completion is not None:
            return completion
        fraction = elapsed_fraction(task, now)
        if fraction is None:
            return IN_PROGRESS_FLOOR
        return _scaled(fraction, IN_PROGRESS_FLOOR, IN_PROGRESS_CEILING)

    if status == TaskStatus.POSTPONED:
        fraction = elapsed_fraction(task, now)
        if fraction is None:
            return POSTPONED_FLOOR
        return _scaled(fraction, POSTPONED_FLOOR, POSTPONED_CEILING)

    return 0
