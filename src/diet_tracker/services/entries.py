"""Meal and water logging."""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from diet_tracker.domain.filters import day_key, record_day
from diet_tracker.domain.records import MealRecord, UserProfile, WaterRecord

_logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Write interface for meal and water records."""

    def save_meal(self, meal: MealRecord) -> MealRecord:
        """Persist a meal record and return the stored version."""

    def save_water_entry(self, entry: WaterRecord) -> WaterRecord:
        """Persist a water record and return the stored version."""

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Replace the user's profile."""


@dataclass
class EntryService:
    """Application service for logging meals and water."""

    repository: EntryRepository

    def log_meal(self, meal: MealRecord) -> MealRecord:
        """Store a meal; the record must carry a usable date."""
        if record_day(meal) is None:
            raise ValueError("Meal date must start with YYYY-MM-DD.")
        saved = self.repository.save_meal(meal)
        _logger.info("Meal logged: date=%s type=%s", saved.timestamp, saved.meal_type)
        return saved

    def log_water(self, amount_ml: object, day: date) -> WaterRecord:
        """Store a water entry of a positive amount in millilitres."""
        if (
            isinstance(amount_ml, bool)
            or not isinstance(amount_ml, int | float)
            or (isinstance(amount_ml, float) and not math.isfinite(amount_ml))
            or int(amount_ml) <= 0
        ):
            raise ValueError("Invalid water amount. Must be a positive number.")
        entry = WaterRecord(timestamp=day_key(day), amount_ml=int(amount_ml))
        saved = self.repository.save_water_entry(entry)
        _logger.info("Water logged: date=%s amount_ml=%s", saved.timestamp, amount_ml)
        return saved

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Store the user's daily targets."""
        return self.repository.save_profile(profile)
