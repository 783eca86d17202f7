# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from taskprism.model.task import Task, TaskView


class FlatRow(TypedDict):
    item: TaskView
    level: int
    is_subtask: bool


class BarSpan(TypedDict):
    left_percent: float
    width_percent: float
    start_index: Optional[int]
    end_index: Optional[int]
    is_visible: bool


class StatusDisplay(TypedDict):
    color: str
    label: str


class Classification(TypedDict):
    color: str
    label: str
    column: str


class ColumnLayout(TypedDict):
    name: str
    columns: list[str]
    # status -> column for statuses that have no column of their own
    fold: dict[str, str]
    fallback: str


class CalendarCell(TypedDict):
    day: pendulum.DateTime
    in_month: bool
    tasks: list[Task]


class GanttRow(TypedDict):
    item: TaskView
    level: int
    is_subtask: bool
    display: Classification
    progress: int
    days_remaining: Optional[int]
    span: BarSpan
    is_milestone: bool


class Assignee(TypedDict):
    id: int
    name: str


DeadlineState = Literal["overdue", "due_today", "upcoming", "closed", "unknown"]
