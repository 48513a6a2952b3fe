"""Derived insights shown alongside daily totals."""

from dataclasses import dataclass

from diet_tracker.domain.aggregation import round_half_up
from diet_tracker.domain.stats import DailyTotals

KCAL_PER_GRAM = {"protein": 4, "carbs": 4, "fat": 9}
DEFAULT_MAX_RECOMMENDED_WATER_ML = 4000
HYDRATION_GOOD_PERCENT = 70
HYDRATION_WARN_PERCENT = 40


@dataclass(frozen=True)
class MacroSplit:
    """Energy contributed by each macro and its share of the total."""

    protein_kcal: float
    carbs_kcal: float
    fat_kcal: float
    protein_percent: float
    carbs_percent: float
    fat_percent: float


@dataclass(frozen=True)
class HydrationProgress:
    """Progress towards the daily water goal."""

    current_ml: int
    goal_ml: float
    percent: int
    status: str


def macro_calorie_split(totals: DailyTotals) -> MacroSplit:
    """Return macro energy in kcal and percentage shares to one decimal."""
    protein_kcal = totals.protein * KCAL_PER_GRAM["protein"]
    carbs_kcal = totals.carbs * KCAL_PER_GRAM["carbs"]
    fat_kcal = totals.fat * KCAL_PER_GRAM["fat"]
    total_kcal = protein_kcal + carbs_kcal + fat_kcal

    def share(kcal: float) -> float:
        if total_kcal <= 0:
            return 0.0
        return round(kcal / total_kcal * 100, 1)

    return MacroSplit(
        protein_kcal=protein_kcal,
        carbs_kcal=carbs_kcal,
        fat_kcal=fat_kcal,
        protein_percent=share(protein_kcal),
        carbs_percent=share(carbs_kcal),
        fat_percent=share(fat_kcal),
    )


def hydration_progress(
    current_ml: int,
    goal_ml: float,
    max_recommended_ml: float = DEFAULT_MAX_RECOMMENDED_WATER_ML,
) -> HydrationProgress:
    """Return hydration percent and a status band.

    Bands: ``danger`` above the recommended maximum, ``good`` from 70%,
    ``warn`` from 40%, ``low`` otherwise.
    """
    percent = round_half_up(current_ml / goal_ml * 100) if goal_ml > 0 else 0
    if current_ml > max_recommended_ml:
        status = "danger"
    elif percent >= HYDRATION_GOOD_PERCENT:
        status = "good"
    elif percent >= HYDRATION_WARN_PERCENT:
        status = "warn"
    else:
        status = "low"
    return HydrationProgress(
        current_ml=current_ml, goal_ml=goal_ml, percent=percent, status=status
    )
