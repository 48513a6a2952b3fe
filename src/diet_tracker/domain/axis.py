"""Y-axis scaling for nutrition charts."""

import math
from collections.abc import Iterable, Iterator

from diet_tracker.domain.stats import AxisScale

HEADROOM = 1.05

_STEP_TABLE = (
    (50, 5),
    (200, 10),
    (1000, 50),
)
_LARGEST_STEP = 100


def choose_step(max_value: float) -> int:
    """Return a gridline step that keeps the axis at round numbers."""
    for upper_bound, step in _STEP_TABLE:
        if max_value <= upper_bound:
            return step
    return _LARGEST_STEP


def compute_axis_max(raw_values: Iterable[float]) -> AxisScale:
    """Return an axis whose max clears the tallest value by about 5%.

    The max is always a positive multiple of the step; all-zero or empty
    data falls back to a single step.
    """
    raw_max = max([*_plottable(raw_values), 0.0])
    padded = raw_max * HEADROOM
    padded_max = math.ceil(padded if math.isfinite(padded) else raw_max)
    step = choose_step(padded_max)
    axis_max = -(-padded_max // step) * step
    return AxisScale(step=step, max=axis_max or step)


def _plottable(values: Iterable[float]) -> Iterator[float]:
    for value in values:
        try:
            number = float(value)
        except OverflowError:
            continue
        if math.isfinite(number):
            yield number
