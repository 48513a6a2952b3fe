"""Tests for chart axis scaling."""

import pytest

from diet_tracker.domain.axis import choose_step, compute_axis_max
from diet_tracker.domain.stats import AxisScale


@pytest.mark.parametrize(
    ("max_value", "expected"),
    [
        (0, 5),
        (50, 5),
        (51, 10),
        (200, 10),
        (201, 50),
        (1000, 50),
        (1001, 100),
        (25000, 100),
    ],
)
def test_choose_step_boundaries(max_value: int, expected: int) -> None:
    assert choose_step(max_value) == expected


def test_compute_axis_max_empty_falls_back_to_one_step() -> None:
    assert compute_axis_max([]) == AxisScale(step=5, max=5)


def test_compute_axis_max_all_zero_falls_back_to_one_step() -> None:
    assert compute_axis_max([0, 0, 0]) == AxisScale(step=5, max=5)


def test_compute_axis_max_pads_and_rounds_to_step() -> None:
    assert compute_axis_max([95]) == AxisScale(step=10, max=100)


def test_compute_axis_max_large_values() -> None:
    # ceil(2400 * 1.05) = 2520, rounded up to the next 100.
    assert compute_axis_max([1800, 2400, 0]) == AxisScale(step=100, max=2600)


def test_compute_axis_max_ignores_negative_and_non_finite() -> None:
    scale = compute_axis_max([-40, float("nan"), float("inf"), 12])

    assert scale == AxisScale(step=5, max=15)


def test_compute_axis_max_near_float_limit_stays_finite() -> None:
    scale = compute_axis_max([1.7e308, 10**400, 30])

    assert scale.step == 100
    assert scale.max >= 1.7e308
    assert scale.max % scale.step == 0


@pytest.mark.parametrize(
    "values",
    [[1], [47], [48], [190], [199], [950], [999], [1001], [4321], [3, 77, 512]],
)
def test_compute_axis_max_covers_data(values: list[int]) -> None:
    scale = compute_axis_max(values)

    assert scale.max >= max(values)
    assert scale.max > 0
    assert scale.max % scale.step == 0
