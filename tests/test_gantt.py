# SPDX-License-Identifier: MIT

import pytest

from taskprism import color
from taskprism.service.gantt import gantt_rows
from taskprism.service.status import COMPACT_LAYOUT
from taskprism.service.window import days_in_window, make_window

from conftest import build_subtask, build_task, day

JANUARY_2025 = days_in_window(make_window(2025, 1))
NOW = day(2025, 1, 16, 12)


def _snapshot():
    return [
        build_task(1, day(2025, 1, 15), day(2025, 1, 17), status="IN_PROGRESS"),
        build_task(
            2,
            day(2025, 1, 6),
            day(2025, 1, 20),
            status="TESTING",
            subtasks=[
                build_subtask(21, True),
                build_subtask(22, start=day(2025, 1, 18), end=day(2025, 1, 18)),
            ],
        ),
        build_task(3, day(2025, 3, 1), day(2025, 3, 4), status="OPEN"),
    ]


def test_rows_follow_flattened_order() -> None:
    rows = gantt_rows(_snapshot(), JANUARY_2025, {2}, NOW)

    assert [(row["item"]["id"], row["level"]) for row in rows] == [
        (2, 0),
        (21, 1),
        (22, 1),
        (1, 0),
        (3, 0),
    ]


def test_rows_carry_full_projection() -> None:
    rows = {row["item"]["id"]: row for row in gantt_rows(_snapshot(), JANUARY_2025, {2}, NOW)}

    task = rows[1]
    assert task["display"] == {
        "color": color.IN_PROGRESS_COLOR,
        "label": "In Progress",
        "column": "IN_PROGRESS",
    }
    assert 10 < task["progress"] < 95
    assert task["days_remaining"] == 1
    assert task["span"]["left_percent"] == pytest.approx(16 * 100 / 35)
    assert task["span"]["width_percent"] == pytest.approx(3 * 100 / 35)
    assert not task["is_milestone"]

    assert rows[2]["progress"] == 80
    assert rows[21]["progress"] == 100
    assert rows[21]["display"]["label"] == "Completed"
    assert rows[22]["span"]["start_index"] == rows[22]["span"]["end_index"] == 19

    hidden = rows[3]
    assert not hidden["span"]["is_visible"]
    assert hidden["days_remaining"] == 47
    assert hidden["progress"] == 0


def test_only_visible_drops_hidden_rows() -> None:
    rows = gantt_rows(_snapshot(), JANUARY_2025, set(), NOW, only_visible=True)

    assert [row["item"]["id"] for row in rows] == [2, 1]


def test_layout_and_milestone_threshold_are_applied() -> None:
    rows = gantt_rows(
        _snapshot(),
        JANUARY_2025,
        {2},
        NOW,
        layout=COMPACT_LAYOUT,
        milestone_threshold_percent=3.0,
    )
    by_id = {row["item"]["id"]: row for row in rows}

    assert by_id[2]["display"]["column"] == "IN_PROGRESS"
    assert by_id[2]["display"]["label"] == "Testing"
    assert by_id[22]["is_milestone"]
    assert not by_id[1]["is_milestone"]
    assert not by_id[3]["is_milestone"]


def test_empty_snapshot() -> None:
    assert gantt_rows([], JANUARY_2025, set(), NOW) == []
