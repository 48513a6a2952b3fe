"""JSON key-value repository for on-device storage."""

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from uuid import uuid4

from diet_tracker.domain.records import MealRecord, UserProfile, WaterRecord
from diet_tracker.services.entries import EntryRepository
from diet_tracker.services.stats import RecordRepository

MEAL_ENTRIES_KEY = "meal_entries"
WATER_ENTRIES_KEY = "water_entries"
PROFILE_KEY = "user_profile"

_logger = logging.getLogger(__name__)


@dataclass
class LocalRecordRepository(RecordRepository, EntryRepository):
    """Stores each key as one JSON document inside ``storage_dir``."""

    storage_dir: Path

    def list_meals(self) -> list[MealRecord]:
        """Return every stored meal."""
        return [
            MealRecord.from_payload(row) for row in self._read_rows(MEAL_ENTRIES_KEY)
        ]

    def list_water_entries(self) -> list[WaterRecord]:
        """Return every stored water entry."""
        return [
            WaterRecord.from_payload(row) for row in self._read_rows(WATER_ENTRIES_KEY)
        ]

    def get_profile(self) -> UserProfile | None:
        """Return the stored profile, if any."""
        data = self._read(PROFILE_KEY)
        if not isinstance(data, dict):
            return None
        return UserProfile.from_payload(data)

    def save_meal(self, meal: MealRecord) -> MealRecord:
        """Append a meal to the stored list."""
        stored = meal if meal.id else replace(meal, id=str(uuid4()))
        rows = self._read_rows(MEAL_ENTRIES_KEY)
        rows.append(stored.to_payload())
        self._write(MEAL_ENTRIES_KEY, rows)
        return stored

    def save_water_entry(self, entry: WaterRecord) -> WaterRecord:
        """Append a water entry to the stored list."""
        stored = entry if entry.id else replace(entry, id=str(uuid4()))
        rows = self._read_rows(WATER_ENTRIES_KEY)
        rows.append(stored.to_payload())
        self._write(WATER_ENTRIES_KEY, rows)
        return stored

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Replace the stored profile."""
        self._write(PROFILE_KEY, profile.to_payload())
        return profile

    def _path(self, key: str) -> Path:
        return self.storage_dir / f"{key}.json"

    def _read(self, key: str) -> object | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            _logger.warning("Ignoring unreadable storage key: %s", key)
            return None

    def _read_rows(self, key: str) -> list[dict[str, object]]:
        data = self._read(key)
        if not isinstance(data, list):
            return []
        return [row for row in data if isinstance(row, dict)]

    def _write(self, key: str, value: object) -> None:
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(json.dumps(value), encoding="utf-8")
        tmp_path.replace(path)
