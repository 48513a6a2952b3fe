"""Statistics service for daily summaries and trend charts."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from diet_tracker.domain.aggregation import (
    ALL_NUTRIENTS,
    DEFAULT_LABEL_EVERY,
    DEFAULT_WINDOW_DAYS,
    build_daily_series,
    calories_by_meal_type,
    sum_nutrients,
    sum_nutrients_exact,
    sum_water,
    summarize_series,
    totals_by_meal_type,
)
from diet_tracker.domain.axis import compute_axis_max
from diet_tracker.domain.filters import filter_by_day
from diet_tracker.domain.insights import (
    HydrationProgress,
    MacroSplit,
    hydration_progress,
    macro_calorie_split,
)
from diet_tracker.domain.records import MealRecord, UserProfile, WaterRecord
from diet_tracker.domain.stats import ChartData, DailyTotals, NutrientSums

_logger = logging.getLogger(__name__)


class RecordRepository(Protocol):
    """Read interface for stored meal, water and profile records."""

    def list_meals(self) -> list[MealRecord]:
        """Return all meal records for the user."""

    def list_water_entries(self) -> list[WaterRecord]:
        """Return all water records for the user."""

    def get_profile(self) -> UserProfile | None:
        """Return the user's profile, if one was saved."""


@dataclass
class DailySummary:
    """Everything the daily summary view shows for one day."""

    day: date
    totals: DailyTotals
    exact: NutrientSums
    calories_by_meal_type: dict[str, int]
    totals_by_meal_type: dict[str, DailyTotals]
    water_ml: int
    targets: UserProfile
    macro_split: MacroSplit
    hydration: HydrationProgress
    meals: list[MealRecord]


@dataclass
class StatsService:
    """Service for computing nutrition stats in the user's timezone."""

    repository: RecordRepository
    timezone_name: str = "UTC"

    def today(self) -> date:
        """Return the current date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()

    def get_daily_summary(self, day: date | None = None) -> DailySummary:
        """Return totals, breakdowns and hydration for a day (default today)."""
        target_day = day or self.today()
        meals = filter_by_day(self.repository.list_meals(), target_day)
        water = filter_by_day(self.repository.list_water_entries(), target_day)
        profile = self.repository.get_profile() or UserProfile()
        _logger.debug(
            "Daily summary: day=%s meals=%s water_entries=%s",
            target_day,
            len(meals),
            len(water),
        )

        totals = sum_nutrients(meals)
        water_ml = sum_water(water)
        return DailySummary(
            day=target_day,
            totals=totals,
            exact=sum_nutrients_exact(meals),
            calories_by_meal_type=calories_by_meal_type(meals),
            totals_by_meal_type=totals_by_meal_type(meals),
            water_ml=water_ml,
            targets=profile,
            macro_split=macro_calorie_split(totals),
            hydration=hydration_progress(water_ml, profile.daily_water_target),
            meals=meals,
        )

    def get_monthly_chart(
        self,
        end_day: date | None = None,
        nutrient: str = ALL_NUTRIENTS,
        window_size_days: int = DEFAULT_WINDOW_DAYS,
        label_every: int = DEFAULT_LABEL_EVERY,
    ) -> ChartData:
        """Return daily series for the window ending at ``end_day`` with an axis."""
        target_end = end_day or self.today()
        records = self.repository.list_meals()
        datasets = build_daily_series(
            records,
            target_end,
            window_size_days,
            nutrient,
            label_every=label_every,
        )
        axis = compute_axis_max(
            value for series in datasets for value in series.values
        )
        _logger.debug(
            "Monthly chart: end=%s nutrient=%s records=%s axis_max=%s",
            target_end,
            nutrient,
            len(records),
            axis.max,
        )
        return ChartData(
            labels=datasets[0].labels,
            datasets=list(datasets),
            axis=axis,
            summaries=[summarize_series(series) for series in datasets],
        )
