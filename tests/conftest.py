"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from pathlib import Path
from uuid import uuid4

import pytest

from diet_tracker.config import Settings
from diet_tracker.containers import AppContainer, build_container
from diet_tracker.domain.records import MealRecord, UserProfile, WaterRecord
from diet_tracker.services.entries import EntryRepository
from diet_tracker.services.stats import RecordRepository


@dataclass
class InMemoryRecordRepository(RecordRepository, EntryRepository):
    """In-memory record repository for tests."""

    meals: list[MealRecord] = field(default_factory=list)
    water: list[WaterRecord] = field(default_factory=list)
    profile: UserProfile | None = None

    def list_meals(self) -> list[MealRecord]:
        return list(self.meals)

    def list_water_entries(self) -> list[WaterRecord]:
        return list(self.water)

    def get_profile(self) -> UserProfile | None:
        return self.profile

    def save_meal(self, meal: MealRecord) -> MealRecord:
        stored = replace(meal, id=meal.id or str(uuid4()))
        self.meals.append(stored)
        return stored

    def save_water_entry(self, entry: WaterRecord) -> WaterRecord:
        stored = replace(entry, id=entry.id or str(uuid4()))
        self.water.append(stored)
        return stored

    def save_profile(self, profile: UserProfile) -> UserProfile:
        self.profile = profile
        return profile


def meal(
    day: str | None,
    calories: object = 0,
    protein: object = 0,
    carbs: object = 0,
    fat: object = 0,
    meal_type: str | None = "lunch",
) -> MealRecord:
    """Build a meal record with the given nutrients."""
    return MealRecord(
        timestamp=day,
        meal_type=meal_type,
        nutrients={
            "calories": calories,
            "protein": protein,
            "carbs": carbs,
            "fat": fat,
        },
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        storage_backend="local",
        local_storage_dir=tmp_path / "storage",
        timezone="UTC",
    )


@pytest.fixture
def repository() -> InMemoryRecordRepository:
    return InMemoryRecordRepository()


@pytest.fixture
def container(
    settings: Settings, repository: InMemoryRecordRepository
) -> AppContainer:
    return build_container(
        settings, repository=repository, entry_repository=repository
    )
