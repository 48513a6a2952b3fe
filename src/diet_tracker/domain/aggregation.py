"""Reduction of meal and water records into totals and daily series.

Every function here is total over its inputs: unusable dates drop a record
from a day, unusable amounts count as zero. Totals are rounded to whole
units for display; ``sum_nutrients_exact`` keeps the unrounded sums.
"""

import math
from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta

from diet_tracker.domain.filters import record_day
from diet_tracker.domain.records import NUTRIENTS, MealRecord, WaterRecord
from diet_tracker.domain.stats import (
    DailyTotals,
    NutrientSums,
    SeriesPoint,
    SeriesSummary,
    TimeSeries,
)

ALL_NUTRIENTS = "all"
# The combined chart compares macros only; calories have their own view.
ALL_SERIES_NUTRIENTS = ("protein", "carbs", "fat")
MEAL_TYPES = ("breakfast", "lunch", "dinner", "snacks")
DEFAULT_WINDOW_DAYS = 30
DEFAULT_LABEL_EVERY = 5


def amount(value: object) -> float:
    """Coerce a stored amount to a non-negative finite float, else 0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return 0.0
    if not isinstance(value, int | float):
        return 0.0
    try:
        number = float(value)
    except OverflowError:
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up; non-finite is 0."""
    if not math.isfinite(value):
        return 0
    return math.floor(value + 0.5)


def sum_nutrients_exact(records: Iterable[MealRecord]) -> NutrientSums:
    """Return unrounded calorie and macro sums across records."""
    sums = dict.fromkeys(NUTRIENTS, 0.0)
    for record in records:
        nutrients = getattr(record, "nutrients", None) or {}
        for name in NUTRIENTS:
            sums[name] += amount(nutrients.get(name))
    return NutrientSums(
        **{name: _finite_or_zero(value) for name, value in sums.items()}
    )


def sum_nutrients(records: Iterable[MealRecord]) -> DailyTotals:
    """Return calorie and macro sums across records, rounded to whole units."""
    exact = sum_nutrients_exact(records)
    return DailyTotals(
        calories=round_half_up(exact.calories),
        protein=round_half_up(exact.protein),
        carbs=round_half_up(exact.carbs),
        fat=round_half_up(exact.fat),
    )


def series_nutrients(nutrient: str) -> tuple[str, ...]:
    """Return the nutrients charted for a nutrient selection."""
    if nutrient == ALL_NUTRIENTS:
        return ALL_SERIES_NUTRIENTS
    if nutrient in NUTRIENTS:
        return (nutrient,)
    raise ValueError(f"Unknown nutrient: {nutrient!r}")


def window_days(window_end_day: date, window_size_days: int) -> list[date]:
    """Return consecutive days ending at ``window_end_day``, oldest first."""
    if isinstance(window_end_day, datetime):
        window_end_day = window_end_day.date()
    return [
        window_end_day - timedelta(days=offset)
        for offset in range(window_size_days - 1, -1, -1)
    ]


def build_daily_series(
    records: Sequence[MealRecord],
    window_end_day: date,
    window_size_days: int = DEFAULT_WINDOW_DAYS,
    nutrient: str = "calories",
    *,
    label_every: int = DEFAULT_LABEL_EVERY,
) -> tuple[TimeSeries, ...]:
    """Build one point per day for the window ending at ``window_end_day``.

    A single nutrient yields one series; ``"all"`` yields parallel protein,
    carbs and fat series. Every ``label_every``-th point from the start of
    the window carries a ``DD/MM`` label, the rest an empty label. Days
    without records are zero.
    """
    names = series_nutrients(nutrient)
    by_day: dict[date, list[MealRecord]] = defaultdict(list)
    for record in records:
        parsed = record_day(record)
        if parsed is not None:
            by_day[parsed].append(record)

    points: dict[str, list[SeriesPoint]] = {name: [] for name in names}
    for index, day in enumerate(window_days(window_end_day, window_size_days)):
        label = day.strftime("%d/%m") if _is_labelled(index, label_every) else ""
        totals = sum_nutrients(by_day.get(day, [])).as_dict()
        for name in names:
            points[name].append(
                SeriesPoint(day=day, label=label, value=totals[name])
            )
    return tuple(
        TimeSeries(nutrient=name, points=tuple(points[name])) for name in names
    )


def summarize_series(series: TimeSeries) -> SeriesSummary:
    """Return averages and first-to-last trend for a daily series."""
    values = series.values
    logged = [value for value in values if value > 0]
    trend = None
    if len(values) >= 2 and values[0] > 0:
        change = (values[-1] - values[0]) / values[0] * 100
        trend = round(change, 1) if math.isfinite(change) else None
    return SeriesSummary(
        nutrient=series.nutrient,
        average=_mean(values),
        logged_day_average=_mean(logged),
        logged_days=len(logged),
        trend_percent=trend,
    )


def totals_by_meal_type(records: Iterable[MealRecord]) -> dict[str, DailyTotals]:
    """Return rounded nutrient totals per meal type.

    Unknown or missing meal types count as snacks.
    """
    buckets: dict[str, list[MealRecord]] = {name: [] for name in MEAL_TYPES}
    for record in records:
        meal_type = (record.meal_type or "").lower()
        buckets[meal_type if meal_type in buckets else "snacks"].append(record)
    return {name: sum_nutrients(meals) for name, meals in buckets.items()}


def calories_by_meal_type(records: Iterable[MealRecord]) -> dict[str, int]:
    """Return rounded calories per meal type; unknown types count as snacks."""
    return {
        name: totals.calories
        for name, totals in totals_by_meal_type(records).items()
    }


def sum_water(records: Iterable[WaterRecord]) -> int:
    """Return total water intake in whole millilitres."""
    return round_half_up(sum(amount(record.amount_ml) for record in records))


def _is_labelled(index: int, label_every: int) -> bool:
    return label_every > 0 and index % label_every == 0


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _mean(values: Sequence[int]) -> float:
    return round(sum(values) / len(values), 1) if values else 0.0
