# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Callable, Iterator, Optional

import pendulum
import pytest

from taskprism import configuration
from taskprism.model.task import Subtask, Task
from taskprism.repository.configuration import CONFIGURATION_REPO
from taskprism.template.task import get_subtask_template, get_task_template
from taskprism.view import state as view_state


def day(year: int, month: int, date: int, hour: int = 0, minute: int = 0) -> pendulum.DateTime:
    return pendulum.datetime(year, month, date, hour, minute, tz="UTC")


def build_task(
    id: int,
    start: Optional[pendulum.DateTime] = None,
    end: Optional[pendulum.DateTime] = None,
    status: str = "OPEN",
    subtasks: Optional[list[Subtask]] = None,
    **fields: Any,
) -> Task:
    task = get_task_template()
    task["id"] = id
    task["title"] = f"Task {id}"
    task["start_date"] = start
    task["end_date"] = end
    task["status"] = status
    task["subtasks"] = subtasks or []
    task.update(fields)  # type: ignore[typeddict-item]
    return task


def build_subtask(
    id: int,
    is_completed: bool = False,
    start: Optional[pendulum.DateTime] = None,
    end: Optional[pendulum.DateTime] = None,
    assignee_id: Optional[int] = None,
) -> Subtask:
    subtask = get_subtask_template()
    subtask["id"] = id
    subtask["title"] = f"Subtask {id}"
    subtask["is_completed"] = is_completed
    subtask["start_date"] = start
    subtask["end_date"] = end
    subtask["assignee_id"] = assignee_id
    return subtask


@pytest.fixture
def make_task() -> Callable[..., Task]:
    return build_task


@pytest.fixture
def make_subtask() -> Callable[..., Subtask]:
    return build_subtask


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the configuration at a temporary file and start from a clean cache."""
    path = tmp_path / "config" / "config.yaml"
    monkeypatch.setattr(configuration, "CONFIG_PATH", path.parent)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", path)
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)
    yield path
    CONFIGURATION_REPO.reset()
