"""Tests for macro split and hydration progress."""

import pytest

from diet_tracker.domain.insights import hydration_progress, macro_calorie_split
from diet_tracker.domain.stats import DailyTotals


def test_macro_calorie_split_weights_fat_at_nine_kcal() -> None:
    split = macro_calorie_split(DailyTotals(calories=0, protein=50, carbs=100, fat=20))

    assert split.protein_kcal == 200
    assert split.carbs_kcal == 400
    assert split.fat_kcal == 180
    assert split.protein_percent == pytest.approx(25.6)
    assert split.carbs_percent == pytest.approx(51.3)
    assert split.fat_percent == pytest.approx(23.1)


def test_macro_calorie_split_without_macros_is_zero() -> None:
    split = macro_calorie_split(DailyTotals(calories=500, protein=0, carbs=0, fat=0))

    assert split.protein_percent == 0
    assert split.carbs_percent == 0
    assert split.fat_percent == 0


@pytest.mark.parametrize(
    ("current_ml", "goal_ml", "percent", "status"),
    [
        (0, 2000, 0, "low"),
        (700, 2000, 35, "low"),
        (800, 2000, 40, "warn"),
        (1400, 2000, 70, "good"),
        (3000, 2000, 150, "good"),
        (4500, 2000, 225, "danger"),
        (500, 0, 0, "low"),
    ],
)
def test_hydration_progress_bands(
    current_ml: int, goal_ml: int, percent: int, status: str
) -> None:
    progress = hydration_progress(current_ml, goal_ml)

    assert progress.percent == percent
    assert progress.status == status
