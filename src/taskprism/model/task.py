# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeAlias, TypedDict

import pendulum

TaskId: TypeAlias = int


class Subtask(TypedDict):
    id: TaskId
    title: str
    content: Optional[str]
    start_date: Optional[pendulum.DateTime]
    end_date: Optional[pendulum.DateTime]
    assignee_id: Optional[int]
    assignee_name: Optional[str]
    is_completed: bool


class Task(TypedDict):
    kind: Literal["task"]
    id: TaskId
    title: str
    content: Optional[str]
    start_date: Optional[pendulum.DateTime]
    end_date: Optional[pendulum.DateTime]
    status: str
    task_type: Optional[str]
    priority: Optional[str]
    team_id: Optional[int]
    team_name: Optional[str]
    project_id: Optional[int]
    project_name: Optional[str]
    created_by_id: Optional[int]
    created_by_name: Optional[str]
    assignee_ids: list[int]
    assignee_names: list[str]
    subtasks: list[Subtask]
    is_postponed: bool
    postponed_from_date: Optional[pendulum.DateTime]
    postponed_to_date: Optional[pendulum.DateTime]


class SubtaskView(TypedDict):
    """A subtask projected into a task-shaped row beneath its parent."""

    kind: Literal["subtask"]
    id: TaskId
    parent_id: TaskId
    title: str
    content: Optional[str]
    start_date: Optional[pendulum.DateTime]
    end_date: Optional[pendulum.DateTime]
    status: str
    task_type: Optional[str]
    priority: Optional[str]
    team_id: Optional[int]
    team_name: Optional[str]
    project_id: Optional[int]
    project_name: Optional[str]
    created_by_id: Optional[int]
    created_by_name: Optional[str]
    assignee_ids: list[int]
    assignee_names: list[str]
    is_completed: bool


TaskView = Task | SubtaskView
