# SPDX-License-Identifier: MIT

from typing import AbstractSet, Sequence

import pendulum

from taskprism.model.projection import ColumnLayout, GanttRow
from taskprism.model.task import Task, TaskId
from taskprism.service.hierarchy import flatten
from taskprism.service.progress import progress
from taskprism.service.status import FULL_LAYOUT, classify, days_remaining
from taskprism.service.timeline import (
    DEFAULT_MILESTONE_THRESHOLD_PERCENT,
    bar_span,
    is_milestone,
)


def gantt_rows(
    tasks: Sequence[Task],
    days: Sequence[pendulum.DateTime],
    expanded_ids: AbstractSet[TaskId],
    now: pendulum.DateTime,
    layout: ColumnLayout = FULL_LAYOUT,
    milestone_threshold_percent: float = DEFAULT_MILESTONE_THRESHOLD_PERCENT,
    only_visible: bool = False,
) -> list[GanttRow]:
    """
    Run the full projection for a Gantt timeline.

    Flattens the hierarchy, then attaches the status display, progress, days
    remaining and bar geometry to each row. Row order is the flattened order.

    Args:
        tasks: The task snapshot
        days: The window's days in chronological order
        expanded_ids: Parents whose subtasks are shown
        now: Current time used for progress and deadlines
        layout: Column layout used for the status column
        milestone_threshold_percent: Bars narrower than this are milestones
        only_visible: Drop rows whose bar misses the window
    """
    rows: list[GanttRow] = []
    for flat_row in flatten(tasks, expanded_ids):
        item = flat_row["item"]
        span = bar_span(item, days)
        if only_visible and not span["is_visible"]:
            continue
        rows.append(
            {
                "item": item,
                "level": flat_row["level"],
                "is_subtask": flat_row["is_subtask"],
                "display": classify(item, layout),
                "progress": progress(item, now),
                "days_remaining": days_remaining(item, now),
                "span": span,
                "is_milestone": is_milestone(span, milestone_threshold_percent),
            }
        )
    return rows
