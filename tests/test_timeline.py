# SPDX-License-Identifier: MIT

import pytest

from taskprism.service.timeline import bar_span, is_milestone
from taskprism.service.window import days_in_window, make_window

from conftest import build_task, day

JANUARY_2025 = days_in_window(make_window(2025, 1))


def test_bar_inside_window() -> None:
    task = build_task(1, day(2025, 1, 15), day(2025, 1, 17))

    span = bar_span(task, JANUARY_2025)

    assert span["is_visible"]
    assert span["start_index"] == 16
    assert span["end_index"] == 18
    assert span["left_percent"] == pytest.approx(16 * 100 / 35)
    assert span["width_percent"] == pytest.approx(3 * 100 / 35)
    assert span["left_percent"] == pytest.approx(45.714, abs=1e-3)
    assert span["width_percent"] == pytest.approx(8.571, abs=1e-3)


def test_bar_clamped_at_window_start() -> None:
    span = bar_span(build_task(1, day(2024, 12, 1), day(2025, 1, 3)), JANUARY_2025)

    assert span["start_index"] == 0
    assert span["end_index"] == 4
    assert span["left_percent"] == 0
    assert span["width_percent"] == pytest.approx(5 * 100 / 35)


def test_bar_clamped_at_window_end() -> None:
    span = bar_span(build_task(1, day(2025, 1, 30), day(2025, 2, 20)), JANUARY_2025)

    assert span["start_index"] == 31
    assert span["end_index"] == 34
    assert span["left_percent"] + span["width_percent"] == pytest.approx(100)


def test_bar_covering_whole_window() -> None:
    span = bar_span(build_task(1, day(2024, 6, 1), day(2025, 6, 1)), JANUARY_2025)

    assert span["left_percent"] == 0
    assert span["width_percent"] == pytest.approx(100)


def test_single_day_bar_is_one_day_wide() -> None:
    span = bar_span(
        build_task(1, day(2025, 1, 15, 17), day(2025, 1, 15, 9)), JANUARY_2025
    )

    assert span["start_index"] == span["end_index"] == 16
    assert span["width_percent"] == pytest.approx(100 / 35)


@pytest.mark.parametrize(
    "start, end",
    [
        (day(2025, 3, 1), day(2025, 3, 5)),
        (day(2024, 11, 1), day(2024, 12, 29)),
        (day(2025, 1, 20), day(2025, 1, 10)),
        (None, day(2025, 1, 10)),
        (day(2025, 1, 10), None),
        (None, None),
    ],
)
def test_hidden_bars(start, end) -> None:
    span = bar_span(build_task(1, start, end), JANUARY_2025)

    assert span == {
        "left_percent": 0.0,
        "width_percent": 0.0,
        "start_index": None,
        "end_index": None,
        "is_visible": False,
    }


def test_empty_window_hides_everything() -> None:
    span = bar_span(build_task(1, day(2025, 1, 1), day(2025, 1, 2)), [])

    assert not span["is_visible"]
    assert span["width_percent"] == 0.0


def test_week_window_geometry() -> None:
    week = days_in_window(make_window(2025, 1, 2))

    span = bar_span(build_task(1, day(2025, 1, 8), day(2025, 1, 20)), week)

    assert span["start_index"] == 2
    assert span["end_index"] == 6
    assert span["left_percent"] == pytest.approx(200 / 7)
    assert span["width_percent"] == pytest.approx(500 / 7)


def test_visible_bars_stay_within_bounds() -> None:
    for start_date in range(1, 31, 3):
        for length in (0, 2, 9, 40):
            start = day(2025, 1, start_date)
            span = bar_span(build_task(1, start, start.add(days=length)), JANUARY_2025)
            assert span["is_visible"]
            assert 0 <= span["left_percent"] < 100
            assert span["width_percent"] > 0
            assert span["left_percent"] + span["width_percent"] <= 100 + 1e-9


def test_milestone_threshold() -> None:
    one_day = bar_span(build_task(1, day(2025, 1, 15), day(2025, 1, 15)), JANUARY_2025)
    hidden = bar_span(build_task(2), JANUARY_2025)

    # A day in a 35 day window is about 2.86% wide
    assert not is_milestone(one_day)
    assert not is_milestone(one_day, 2.0)
    assert is_milestone(one_day, 3.0)
    assert not is_milestone(hidden, 50.0)
