# SPDX-License-Identifier: MIT

from typing import AbstractSet, Sequence

from taskprism.model.projection import FlatRow
from taskprism.model.task import Subtask, SubtaskView, Task, TaskId
from taskprism.model.task_status import TaskStatus


def has_subtasks(task: Task) -> bool:
    return bool(task.get("subtasks"))


def parent_ids(tasks: Sequence[Task]) -> list[TaskId]:
    """Ids of the tasks that own at least one subtask, in input order."""
    return [task["id"] for task in tasks if has_subtasks(task)]


def toggle_expanded(
    expanded_ids: AbstractSet[TaskId], task_id: TaskId
) -> frozenset[TaskId]:
    """Return a new expand set with task_id flipped; the input is untouched."""
    if task_id in expanded_ids:
        return frozenset(expanded_ids - {task_id})
    return frozenset(expanded_ids | {task_id})


def subtask_view(parent: Task, subtask: Subtask) -> SubtaskView:
    """
    Project a subtask into a task-shaped row.

    Classification fields come from the parent, dates fall back to the
    parent's when the subtask has none, and the status is derived from the
    completion flag since subtasks carry no status of their own.
    """
    assignee_id = subtask.get("assignee_id")
    assignee_name = subtask.get("assignee_name")
    return {
        "kind": "subtask",
        "id": subtask["id"],
        "parent_id": parent["id"],
        "title": subtask["title"],
        "content": subtask.get("content"),
        "start_date": subtask.get("start_date") or parent["start_date"],
        "end_date": subtask.get("end_date") or parent["end_date"],
        "status": (
            TaskStatus.COMPLETED
            if subtask.get("is_completed")
            else TaskStatus.IN_PROGRESS
        ),
        "task_type": parent["task_type"],
        "priority": parent["priority"],
        "team_id": parent["team_id"],
        "team_name": parent["team_name"],
        "project_id": parent["project_id"],
        "project_name": parent["project_name"],
        "created_by_id": parent["created_by_id"],
        "created_by_name": parent["created_by_name"],
        "assignee_ids": [assignee_id] if assignee_id is not None else [],
        "assignee_names": [assignee_name] if assignee_name is not None else [],
        "is_completed": bool(subtask.get("is_completed")),
    }


def flatten(tasks: Sequence[Task], expanded_ids: AbstractSet[TaskId]) -> list[FlatRow]:
    """
    Lay tasks out as a leveled list for tree-like display.

    Tasks with subtasks come first, each followed by its subtasks when its id
    is in expanded_ids. Tasks without subtasks follow in their original order.
    No sorting happens here.

    Args:
        tasks: The task snapshot
        expanded_ids: Ids of the parents whose subtasks should be shown

    Returns:
        Rows of {item, level, is_subtask}
    """
    parents = [task for task in tasks if has_subtasks(task)]
    leaves = [task for task in tasks if not has_subtasks(task)]

    rows: list[FlatRow] = []
    emitted_parent_ids: set[TaskId] = set()
    for parent in parents:
        rows.append({"item": parent, "level": 0, "is_subtask": False})
        emitted_parent_ids.add(parent["id"])
        if parent["id"] in expanded_ids:
            for subtask in parent["subtasks"]:
                rows.append(
                    {
                        "item": subtask_view(parent, subtask),
                        "level": 1,
                        "is_subtask": True,
                    }
                )

    for task in leaves:
        if task["id"] not in emitted_parent_ids:
            rows.append({"item": task, "level": 0, "is_subtask": False})

    return rows
