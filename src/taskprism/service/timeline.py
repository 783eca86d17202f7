# SPDX-License-Identifier: MIT

from typing import Sequence

import pendulum

from taskprism.model.projection import BarSpan
from taskprism.model.task import TaskView
from taskprism.service.projection import overlaps, task_bounds

DEFAULT_MILESTONE_THRESHOLD_PERCENT = 2.0


def _hidden_span() -> BarSpan:
    return {
        "left_percent": 0.0,
        "width_percent": 0.0,
        "start_index": None,
        "end_index": None,
        "is_visible": False,
    }


def bar_span(task: TaskView, days: Sequence[pendulum.DateTime]) -> BarSpan:
    """
    Position of a task's bar over a day-indexed timeline, in percent.

    The task is clamped to the window, so a task starting before the first
    day starts at index 0 and one ending after the last day ends at the last
    index. Tasks that miss the window entirely, have no usable dates, or have
    an inverted range are not visible and get zero geometry.

    Args:
        task: Task or subtask view to position
        days: The window's days in chronological order

    Returns:
        {left_percent, width_percent, start_index, end_index, is_visible}
    """
    if not days:
        return _hidden_span()

    window_start = days[0].start_of("day")
    window_end = days[-1].end_of("day")
    if not overlaps(task, window_start, window_end):
        return _hidden_span()

    bounds = task_bounds(task)
    assert bounds is not None
    clamped_start = max(bounds[0], window_start)
    clamped_end = min(bounds[1], window_end)

    start_index = 0
    for index, day in enumerate(days):
        if day.end_of("day") >= clamped_start:
            start_index = index
            break

    end_index = len(days) - 1
    for index in range(len(days) - 1, -1, -1):
        if days[index].start_of("day") <= clamped_end:
            end_index = index
            break

    day_width = 100 / len(days)
    return {
        "left_percent": start_index * day_width,
        "width_percent": (end_index - start_index + 1) * day_width,
        "start_index": start_index,
        "end_index": end_index,
        "is_visible": True,
    }


def is_milestone(
    span: BarSpan, threshold_percent: float = DEFAULT_MILESTONE_THRESHOLD_PERCENT
) -> bool:
    """Whether a visible bar is narrow enough to draw as a point marker."""
    return span["is_visible"] and span["width_percent"] < threshold_percent
