# SPDX-License-Identifier: MIT

import logging
from typing import Mapping, Optional, Sequence, TypeVar

import pendulum

from taskprism import color
from taskprism.configuration import ColumnLayoutConfig
from taskprism.model.priority import Priority
from taskprism.model.projection import (
    Classification,
    ColumnLayout,
    DeadlineState,
    StatusDisplay,
)
from taskprism.model.task import Task, TaskView
from taskprism.model.task_status import (
    CLOSED_STATUSES,
    OVERDUE_EXEMPT_STATUSES,
    TaskStatus,
)
from taskprism.model.task_type import TaskType
from taskprism.time import calendar_days_between

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=TaskView)

STATUS_DISPLAY: dict[str, StatusDisplay] = {
    TaskStatus.OPEN: {"color": color.OPEN_COLOR, "label": "Open"},
    TaskStatus.IN_PROGRESS: {"color": color.IN_PROGRESS_COLOR, "label": "In Progress"},
    TaskStatus.TESTING: {"color": color.TESTING_COLOR, "label": "Testing"},
    TaskStatus.COMPLETED: {"color": color.COMPLETED_COLOR, "label": "Completed"},
    TaskStatus.POSTPONED: {"color": color.POSTPONED_COLOR, "label": "Postponed"},
    TaskStatus.CANCELLED: {"color": color.CANCELLED_COLOR, "label": "Cancelled"},
    TaskStatus.OVERDUE: {"color": color.OVERDUE_COLOR, "label": "Overdue"},
}

TASK_TYPE_DISPLAY: dict[str, StatusDisplay] = {
    TaskType.TASK: {"color": color.TASK_COLOR, "label": "Task"},
    TaskType.FEATURE: {"color": color.FEATURE_COLOR, "label": "Feature"},
    TaskType.BUG: {"color": color.BUG_COLOR, "label": "Bug"},
}

PRIORITY_DISPLAY: dict[str, StatusDisplay] = {
    Priority.NORMAL: {"color": color.NORMAL_PRIORITY_COLOR, "label": "Normal"},
    Priority.HIGH: {"color": color.HIGH_PRIORITY_COLOR, "label": "High"},
    Priority.URGENT: {"color": color.URGENT_PRIORITY_COLOR, "label": "Urgent"},
}

FULL_LAYOUT: ColumnLayout = {
    "name": "full",
    "columns": [status.value for status in TaskStatus],
    "fold": {},
    "fallback": TaskStatus.OPEN,
}

COMPACT_LAYOUT: ColumnLayout = {
    "name": "compact",
    "columns": [
        TaskStatus.OPEN,
        TaskStatus.IN_PROGRESS,
        TaskStatus.COMPLETED,
        TaskStatus.POSTPONED,
    ],
    "fold": {
        TaskStatus.CANCELLED: TaskStatus.OPEN,
        TaskStatus.OVERDUE: TaskStatus.OPEN,
        TaskStatus.TESTING: TaskStatus.IN_PROGRESS,
    },
    "fallback": TaskStatus.OPEN,
}

BUILTIN_LAYOUTS: dict[str, ColumnLayout] = {
    FULL_LAYOUT["name"]: FULL_LAYOUT,
    COMPACT_LAYOUT["name"]: COMPACT_LAYOUT,
}


def status_display(status: str) -> StatusDisplay:
    """Color and label for a status; unknown statuses get a neutral color."""
    display = STATUS_DISPLAY.get(status)
    if display is None:
        return {"color": color.NEUTRAL_COLOR, "label": str(status)}
    return display


def task_type_display(task_type: Optional[str]) -> StatusDisplay:
    return TASK_TYPE_DISPLAY.get(task_type or TaskType.TASK) or {
        "color": color.NEUTRAL_COLOR,
        "label": str(task_type),
    }


def priority_display(priority: Optional[str]) -> StatusDisplay:
    return PRIORITY_DISPLAY.get(priority or Priority.NORMAL) or {
        "color": color.NEUTRAL_COLOR,
        "label": str(priority),
    }


def column_for_status(status: str, layout: ColumnLayout) -> str:
    if status in layout["columns"]:
        return status
    folded = layout["fold"].get(status)
    if folded is not None and folded in layout["columns"]:
        return folded
    return layout["fallback"]


def classify(task: TaskView, layout: ColumnLayout = FULL_LAYOUT) -> Classification:
    display = status_display(task["status"])
    return {
        "color": display["color"],
        "label": display["label"],
        "column": column_for_status(task["status"], layout),
    }


def group_by_column(
    tasks: Sequence[T], layout: ColumnLayout = FULL_LAYOUT
) -> dict[str, list[T]]:
    """Bucket tasks into the layout's columns, keeping input order per column."""
    columns: dict[str, list[T]] = {column: [] for column in layout["columns"]}
    for task in tasks:
        columns[column_for_status(task["status"], layout)].append(task)
    return columns


def status_counts(tasks: Sequence[TaskView]) -> dict[str, int]:
    """Task totals per status; every known status is present, unknown ones are added."""
    counts: dict[str, int] = {status.value: 0 for status in TaskStatus}
    for task in tasks:
        counts[task["status"]] = counts.get(task["status"], 0) + 1
    return counts


def days_remaining(task: TaskView, today: pendulum.DateTime) -> Optional[int]:
    """
    Calendar days from today until the end date.

    Negative means overdue, zero means due today. None when the task has no
    usable end date.
    """
    if task["end_date"] is None:
        return None
    return calendar_days_between(today, task["end_date"])


def deadline_state(task: TaskView, today: pendulum.DateTime) -> DeadlineState:
    if task["status"] in CLOSED_STATUSES:
        return "closed"
    remaining = days_remaining(task, today)
    if remaining is None:
        return "unknown"
    if remaining < 0:
        return "overdue"
    if remaining == 0:
        return "due_today"
    return "upcoming"


def find_overdue(tasks: Sequence[Task], today: pendulum.DateTime) -> list[Task]:
    """
    Tasks that have run past their end date and still need to be flagged.

    Mirrors the backend's nightly job: the end date is before today and the
    status is not already final, under test, or overdue.
    """
    result = []
    for task in tasks:
        if task["status"] in OVERDUE_EXEMPT_STATUSES:
            continue
        remaining = days_remaining(task, today)
        if remaining is not None and remaining < 0:
            result.append(task)
    return result


def layout_from_config(name: str, layout_config: ColumnLayoutConfig) -> ColumnLayout:
    """
    Build a column layout from its configuration entry.

    Raises:
        ValueError: If the entry is malformed, has no columns, or folds into
            an unknown column
    """
    if not isinstance(layout_config, Mapping):
        raise ValueError(f"Column layout '{name}' must be a mapping")
    raw_columns = layout_config.get("columns") or []
    if not isinstance(raw_columns, list):
        raise ValueError(f"Column layout '{name}' columns must be a list")
    columns = [str(column) for column in raw_columns]
    if not columns:
        raise ValueError(f"Column layout '{name}' declares no columns")
    raw_fold = layout_config.get("fold") or {}
    if not isinstance(raw_fold, Mapping):
        raise ValueError(f"Column layout '{name}' fold must be a mapping")
    fold = {str(status): str(column) for status, column in raw_fold.items()}
    for status, column in fold.items():
        if column not in columns:
            raise ValueError(
                f"Column layout '{name}' folds {status} into unknown column {column}"
            )
    fallback = layout_config.get("fallback") or columns[0]
    if fallback not in columns:
        raise ValueError(
            f"Column layout '{name}' falls back to unknown column {fallback}"
        )
    return {"name": name, "columns": columns, "fold": fold, "fallback": fallback}


def resolve_layouts(
    layout_configs: Optional[Mapping[str, ColumnLayoutConfig]],
) -> dict[str, ColumnLayout]:
    """Built-in layouts overlaid with the user's configured layouts."""
    layouts = dict(BUILTIN_LAYOUTS)
    if layout_configs is not None and not isinstance(layout_configs, Mapping):
        raise ValueError("column_layouts must map layout names to layouts")
    for name, layout_config in (layout_configs or {}).items():
        layouts[name] = layout_from_config(name, layout_config)
        logger.debug("Loaded column layout %s", name)
    return layouts
