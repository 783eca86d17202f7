# SPDX-License-Identifier: MIT

from typing import Optional

from rich.text import Text

from taskprism.model.projection import StatusDisplay
from taskprism.model.task import TaskView


def styled(display: StatusDisplay) -> Text:
    return Text(display["label"], style=display["color"])


def task_title(task: TaskView, level: int = 0) -> str:
    title = task["title"] or "[no title]"
    return f"{'  ' * level}{'└ ' if level > 0 else ''}{title}"


def format_days_remaining(days: Optional[int]) -> str:
    if days is None:
        return ""
    if days < 0:
        return f"{-days}d overdue"
    if days == 0:
        return "due today"
    return f"{days}d left"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"
