# SPDX-License-Identifier: MIT

from taskprism.model.task import Subtask, Task
from taskprism.model.task_status import TaskStatus


def get_task_template() -> Task:
    return {
        "kind": "task",
        "id": 0,
        "title": "",
        "content": None,
        "start_date": None,
        "end_date": None,
        "status": TaskStatus.OPEN,
        "task_type": None,
        "priority": None,
        "team_id": None,
        "team_name": None,
        "project_id": None,
        "project_name": None,
        "created_by_id": None,
        "created_by_name": None,
        "assignee_ids": [],
        "assignee_names": [],
        "subtasks": [],
        "is_postponed": False,
        "postponed_from_date": None,
        "postponed_to_date": None,
    }


def get_subtask_template() -> Subtask:
    return {
        "id": 0,
        "title": "",
        "content": None,
        "start_date": None,
        "end_date": None,
        "assignee_id": None,
        "assignee_name": None,
        "is_completed": False,
    }
