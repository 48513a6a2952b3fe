"""Domain models for aggregated nutrition statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class NutrientSums:
    """Unrounded nutrient sums."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class DailyTotals:
    """Whole-unit nutrient totals for display."""

    calories: int
    protein: int
    carbs: int
    fat: int

    def as_dict(self) -> dict[str, int]:
        """Return the totals keyed by nutrient name."""
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
        }


@dataclass(frozen=True)
class SeriesPoint:
    """One day of a time series."""

    day: date
    label: str
    value: int


@dataclass(frozen=True)
class TimeSeries:
    """Daily values for a single nutrient, oldest first."""

    nutrient: str
    points: tuple[SeriesPoint, ...]

    @property
    def labels(self) -> list[str]:
        """Return the display labels."""
        return [point.label for point in self.points]

    @property
    def values(self) -> list[int]:
        """Return the daily values."""
        return [point.value for point in self.points]


@dataclass(frozen=True)
class AxisScale:
    """Y-axis gridline spacing and upper bound."""

    step: int
    max: int


@dataclass(frozen=True)
class SeriesSummary:
    """Window averages and trend for one charted nutrient.

    ``average`` spreads the total over every day of the window, while
    ``logged_day_average`` only counts days with a non-zero value.
    ``trend_percent`` compares the last day with the first and is ``None``
    when the first day is zero, the window has fewer than two days, or the
    change is out of float range.
    """

    nutrient: str
    average: float
    logged_day_average: float
    logged_days: int
    trend_percent: float | None


@dataclass(frozen=True)
class ChartData:
    """Chart-ready series sharing one label row and one axis."""

    labels: list[str]
    datasets: list[TimeSeries]
    axis: AxisScale
    summaries: list[SeriesSummary]
