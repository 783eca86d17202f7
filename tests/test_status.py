# SPDX-License-Identifier: MIT

import pytest

from taskprism import color
from taskprism.model.task_status import TaskStatus
from taskprism.service.status import (
    COMPACT_LAYOUT,
    FULL_LAYOUT,
    classify,
    column_for_status,
    days_remaining,
    deadline_state,
    find_overdue,
    group_by_column,
    layout_from_config,
    priority_display,
    resolve_layouts,
    status_counts,
    status_display,
    task_type_display,
)

from conftest import build_task, day


@pytest.mark.parametrize(
    "status, label, expected_color",
    [
        ("OPEN", "Open", color.OPEN_COLOR),
        ("IN_PROGRESS", "In Progress", color.IN_PROGRESS_COLOR),
        ("TESTING", "Testing", color.TESTING_COLOR),
        ("COMPLETED", "Completed", color.COMPLETED_COLOR),
        ("POSTPONED", "Postponed", color.POSTPONED_COLOR),
        ("CANCELLED", "Cancelled", color.CANCELLED_COLOR),
        ("OVERDUE", "Overdue", color.OVERDUE_COLOR),
    ],
)
def test_status_display(status: str, label: str, expected_color: str) -> None:
    assert status_display(status) == {"color": expected_color, "label": label}


def test_every_status_has_a_distinct_color() -> None:
    colors = {status_display(status)["color"] for status in TaskStatus}

    assert len(colors) == len(TaskStatus)
    assert color.NEUTRAL_COLOR not in colors


def test_unknown_status_gets_neutral_display() -> None:
    assert status_display("BLOCKED") == {
        "color": color.NEUTRAL_COLOR,
        "label": "BLOCKED",
    }


def test_task_type_and_priority_display_defaults() -> None:
    assert task_type_display(None)["label"] == "Task"
    assert task_type_display("BUG")["label"] == "Bug"
    assert priority_display(None)["label"] == "Normal"
    assert priority_display("URGENT")["label"] == "Urgent"
    assert priority_display("EXTREME")["color"] == color.NEUTRAL_COLOR


def test_full_layout_has_a_column_per_status() -> None:
    for status in TaskStatus:
        assert column_for_status(status, FULL_LAYOUT) == status


@pytest.mark.parametrize(
    "status, column",
    [
        ("OPEN", "OPEN"),
        ("IN_PROGRESS", "IN_PROGRESS"),
        ("TESTING", "IN_PROGRESS"),
        ("COMPLETED", "COMPLETED"),
        ("POSTPONED", "POSTPONED"),
        ("CANCELLED", "OPEN"),
        ("OVERDUE", "OPEN"),
        ("BLOCKED", "OPEN"),
    ],
)
def test_compact_layout_folds_statuses(status: str, column: str) -> None:
    assert column_for_status(status, COMPACT_LAYOUT) == column


def test_classify_keeps_status_color_when_folded() -> None:
    task = build_task(1, status="OVERDUE")

    assert classify(task, COMPACT_LAYOUT) == {
        "color": color.OVERDUE_COLOR,
        "label": "Overdue",
        "column": "OPEN",
    }


def test_group_by_column_places_every_task_once() -> None:
    tasks = [
        build_task(1, status="OPEN"),
        build_task(2, status="TESTING"),
        build_task(3, status="OVERDUE"),
        build_task(4, status="BLOCKED"),
        build_task(5, status="COMPLETED"),
    ]

    grouped = group_by_column(tasks, COMPACT_LAYOUT)

    assert list(grouped) == ["OPEN", "IN_PROGRESS", "COMPLETED", "POSTPONED"]
    assert [t["id"] for t in grouped["OPEN"]] == [1, 3, 4]
    assert [t["id"] for t in grouped["IN_PROGRESS"]] == [2]
    assert grouped["POSTPONED"] == []
    assert sum(len(column) for column in grouped.values()) == len(tasks)


def test_status_counts() -> None:
    tasks = [
        build_task(1, status="OPEN"),
        build_task(2, status="OPEN"),
        build_task(3, status="COMPLETED"),
        build_task(4, status="BLOCKED"),
    ]

    counts = status_counts(tasks)

    assert counts["OPEN"] == 2
    assert counts["COMPLETED"] == 1
    assert counts["TESTING"] == 0
    assert counts["BLOCKED"] == 1
    assert sum(counts.values()) == 4


def test_days_remaining_counts_calendar_days() -> None:
    task = build_task(1, day(2025, 1, 1), day(2025, 1, 10))

    assert days_remaining(task, day(2025, 1, 12, 10, 30)) == -2
    assert days_remaining(task, day(2025, 1, 10, 23)) == 0
    assert days_remaining(task, day(2025, 1, 9, 23, 59)) == 1
    assert days_remaining(task, day(2024, 12, 31)) == 10


def test_days_remaining_without_end_date() -> None:
    assert days_remaining(build_task(1, day(2025, 1, 1), None), day(2025, 1, 5)) is None


def test_deadline_state() -> None:
    today = day(2025, 1, 10, 9)

    assert deadline_state(build_task(1, end=day(2025, 1, 9)), today) == "overdue"
    assert deadline_state(build_task(2, end=day(2025, 1, 10)), today) == "due_today"
    assert deadline_state(build_task(3, end=day(2025, 1, 11)), today) == "upcoming"
    assert deadline_state(build_task(4), today) == "unknown"
    assert (
        deadline_state(build_task(5, end=day(2025, 1, 1), status="COMPLETED"), today)
        == "closed"
    )
    assert (
        deadline_state(build_task(6, end=day(2025, 1, 1), status="CANCELLED"), today)
        == "closed"
    )


def test_find_overdue() -> None:
    tasks = [
        build_task(1, day(2025, 1, 1), day(2025, 1, 10), status="OPEN"),
        build_task(2, day(2025, 1, 1), day(2025, 1, 19), status="IN_PROGRESS"),
        build_task(3, day(2024, 12, 1), day(2025, 1, 1), status="POSTPONED"),
        build_task(4, day(2025, 1, 1), day(2025, 1, 10), status="TESTING"),
        build_task(5, day(2025, 1, 1), day(2025, 1, 10), status="COMPLETED"),
        build_task(6, day(2025, 1, 1), day(2025, 1, 10), status="OVERDUE"),
        build_task(7, day(2025, 1, 1), day(2025, 1, 10), status="CANCELLED"),
        build_task(8, day(2025, 1, 1), day(2025, 1, 20), status="OPEN"),
        build_task(9, day(2025, 1, 1), None, status="OPEN"),
    ]

    overdue = find_overdue(tasks, day(2025, 1, 20))

    assert [t["id"] for t in overdue] == [1, 2, 3]


def test_layout_from_config() -> None:
    layout = layout_from_config(
        "triage",
        {
            "columns": ["OPEN", "DONE"],
            "fold": {"COMPLETED": "DONE", "CANCELLED": "DONE"},
        },
    )

    assert layout["fallback"] == "OPEN"
    assert column_for_status("CANCELLED", layout) == "DONE"
    assert column_for_status("TESTING", layout) == "OPEN"


@pytest.mark.parametrize(
    "layout_config",
    [
        {"columns": []},
        {"columns": ["OPEN"], "fold": {"COMPLETED": "DONE"}},
        {"columns": ["OPEN"], "fallback": "DONE"},
        ["OPEN", "COMPLETED"],
        "OPEN",
        {"columns": "OPEN"},
        {"columns": ["OPEN"], "fold": ["COMPLETED"]},
    ],
)
def test_layout_from_config_rejects_invalid_layouts(layout_config) -> None:
    with pytest.raises(ValueError):
        layout_from_config("broken", layout_config)


def test_resolve_layouts_overlays_builtins() -> None:
    layouts = resolve_layouts({"compact": {"columns": ["OPEN", "COMPLETED"]}})

    assert set(layouts) == {"full", "compact"}
    assert layouts["compact"]["columns"] == ["OPEN", "COMPLETED"]
    assert layouts["full"] is FULL_LAYOUT
    assert resolve_layouts(None) == {"full": FULL_LAYOUT, "compact": COMPACT_LAYOUT}


def test_resolve_layouts_rejects_non_mapping_configuration() -> None:
    with pytest.raises(ValueError):
        resolve_layouts(["compact"])  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="must be a mapping"):
        resolve_layouts({"board": ["OPEN", "COMPLETED"]})  # type: ignore[dict-item]
