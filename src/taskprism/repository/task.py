# SPDX-License-Identifier: MIT

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from taskprism.model.task import Subtask, Task
from taskprism.model.task_status import KNOWN_STATUSES, TaskStatus
from taskprism.template.task import get_subtask_template, get_task_template
from taskprism.time import DEFAULT_TIMEZONE, datetime_from_value_lenient

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a task snapshot document cannot be decoded."""


def _field(raw: dict[str, Any], camel: str, snake: str, default: Any = None) -> Any:
    if camel in raw:
        return raw[camel]
    return raw.get(snake, default)


def _list_field(
    raw: dict[str, Any], camel: str, snake: str, owner: str
) -> list[Any]:
    value = _field(raw, camel, snake)
    if value is None:
        return []
    if not isinstance(value, list):
        raise SnapshotError(f"{camel} on {owner} must be a list, got {value!r}")
    return value


def _optional_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (OverflowError, TypeError, ValueError):
        return None


class TaskRepository:
    """
    Read-only task snapshot backed by a YAML or JSON file.

    The document is either a list of tasks or a mapping with a "tasks" list,
    each task in the backend's camelCase transfer shape (snake_case keys are
    accepted too). Tasks are converted once, on first access.
    """

    def __init__(self, path: Path, tz: str = DEFAULT_TIMEZONE) -> None:
        self.path = path
        self.tz = tz
        self._tasks: Optional[list[Task]] = None

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        try:
            text = self.path.read_text()
        except OSError as e:
            raise SnapshotError(f"Cannot read snapshot {self.path}: {e}") from e

        try:
            if self.path.suffix == ".json":
                document = json.loads(text)
            else:
                document = load(text, Loader=Loader)
        except (YAMLError, json.JSONDecodeError) as e:
            raise SnapshotError(f"Cannot decode snapshot {self.path}: {e}") from e

        self._tasks = [
            self.__convert_task_for_deserialization(raw_task)
            for raw_task in self.__raw_tasks(document)
        ]
        logger.debug("Loaded %d tasks from %s", len(self._tasks), self.path)

    def __raw_tasks(self, document: Any) -> list[dict[str, Any]]:
        if document is None:
            return []
        if isinstance(document, dict):
            document = document.get("tasks") or []
        if not isinstance(document, list):
            raise SnapshotError(
                f"Snapshot {self.path} must hold a list of tasks or a 'tasks' list"
            )
        for raw_task in document:
            if not isinstance(raw_task, dict):
                raise SnapshotError(
                    f"Snapshot {self.path} contains a task that is not a mapping"
                )
        return document

    def __date(
        self, raw: dict[str, Any], camel: str, snake: str, owner: str
    ) -> Any:
        value = _field(raw, camel, snake)
        converted = datetime_from_value_lenient(value, self.tz)
        if converted is None and value not in (None, ""):
            logger.warning("Ignoring unparseable %s %r on %s", camel, value, owner)
        return converted

    def __convert_subtask_for_deserialization(
        self, raw: dict[str, Any], owner: str
    ) -> Subtask:
        subtask = get_subtask_template()
        subtask_id = _optional_int(raw.get("id"))
        subtask["id"] = subtask_id if subtask_id is not None else 0
        subtask["title"] = str(raw.get("title") or "")
        subtask["content"] = raw.get("content")
        subtask_owner = f"subtask {subtask['id']} of {owner}"
        subtask["start_date"] = self.__date(
            raw, "startDate", "start_date", subtask_owner
        )
        subtask["end_date"] = self.__date(raw, "endDate", "end_date", subtask_owner)
        subtask["assignee_id"] = _optional_int(
            _field(raw, "assigneeId", "assignee_id")
        )
        subtask["assignee_name"] = _field(raw, "assigneeName", "assignee_name")
        subtask["is_completed"] = bool(
            _field(raw, "isCompleted", "is_completed", False)
        )
        return subtask

    def __convert_task_for_deserialization(self, raw: dict[str, Any]) -> Task:
        task_id = _optional_int(raw.get("id"))
        if task_id is None:
            raise SnapshotError(f"Task without a valid integer id: {raw!r}")
        owner = f"task {task_id}"

        task = get_task_template()
        task["id"] = task_id
        task["title"] = str(raw.get("title") or "")
        task["content"] = raw.get("content")
        task["start_date"] = self.__date(raw, "startDate", "start_date", owner)
        task["end_date"] = self.__date(raw, "endDate", "end_date", owner)

        status = raw.get("status")
        if status is None:
            status = TaskStatus.OPEN
        elif not isinstance(status, str):
            raise SnapshotError(f"Status on {owner} must be a string, got {status!r}")
        elif status not in KNOWN_STATUSES:
            logger.warning("Unknown status %r on %s", status, owner)
        task["status"] = str(status)

        task["task_type"] = _field(raw, "taskType", "task_type")
        task["priority"] = raw.get("priority")
        task["team_id"] = _optional_int(_field(raw, "teamId", "team_id"))
        task["team_name"] = _field(raw, "teamName", "team_name")
        task["project_id"] = _optional_int(_field(raw, "projectId", "project_id"))
        task["project_name"] = _field(raw, "projectName", "project_name")
        task["created_by_id"] = _optional_int(
            _field(raw, "createdById", "created_by_id")
        )
        task["created_by_name"] = _field(raw, "createdByName", "created_by_name")

        # Ordered set: keep first occurrence
        assignee_ids = _list_field(raw, "assigneeIds", "assignee_ids", owner)
        task["assignee_ids"] = list(
            dict.fromkeys(
                assignee_id
                for assignee_id in (_optional_int(value) for value in assignee_ids)
                if assignee_id is not None
            )
        )
        assignee_names = _list_field(raw, "assigneeNames", "assignee_names", owner)
        task["assignee_names"] = [str(name) for name in assignee_names]

        task["subtasks"] = [
            self.__convert_subtask_for_deserialization(raw_subtask, owner)
            for raw_subtask in _list_field(raw, "subtasks", "subtasks", owner)
            if isinstance(raw_subtask, dict)
        ]

        task["is_postponed"] = bool(_field(raw, "isPostponed", "is_postponed", False))
        task["postponed_from_date"] = self.__date(
            raw, "postponedFromDate", "postponed_from_date", owner
        )
        task["postponed_to_date"] = self.__date(
            raw, "postponedToDate", "postponed_to_date", owner
        )
        return task

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_task(self, id: int) -> Task:
        for task in self.tasks:
            if task["id"] == id:
                return deepcopy(task)
        raise ValueError(f"No task with id {id} in {self.path}")
