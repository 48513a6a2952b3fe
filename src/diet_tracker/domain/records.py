"""Domain models for stored meal, water and profile records."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

NUTRIENTS = ("calories", "protein", "carbs", "fat")

DEFAULT_CALORIES_TARGET = 2200
DEFAULT_PROTEIN_TARGET = 150
DEFAULT_CARBS_TARGET = 250
DEFAULT_FAT_TARGET = 80
DEFAULT_WATER_TARGET_ML = 2000


@dataclass(frozen=True)
class MealRecord:
    """A logged meal as supplied by a record repository.

    ``timestamp`` holds either a ``YYYY-MM-DD`` day or a full ISO-8601
    date-time. Nutrient values are kept exactly as stored; aggregation
    decides what counts as a usable number.
    """

    timestamp: str | None
    meal_type: str | None = None
    nutrients: Mapping[str, object] = field(default_factory=dict)
    id: str | None = None
    food_name: str | None = None
    food_id: str | None = None
    quantity: float = 1.0
    notes: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "MealRecord":
        """Build a record from a stored payload.

        Accepts ``date`` or ``timestamp`` for the day and nutrients either
        nested under ``nutrients`` or flat on the payload.
        """
        nested = payload.get("nutrients")
        if isinstance(nested, Mapping):
            nutrients = {name: nested.get(name) for name in NUTRIENTS}
        else:
            nutrients = {name: payload.get(name) for name in NUTRIENTS}
        raw_id = payload.get("id")
        raw_quantity = payload.get("quantity")
        return cls(
            timestamp=_first_str(payload.get("date"), payload.get("timestamp")),
            meal_type=_optional_str(
                payload.get("mealType") or payload.get("meal_type")
            ),
            nutrients=nutrients,
            id=str(raw_id) if raw_id is not None else None,
            food_name=_optional_str(
                payload.get("foodName") or payload.get("food_name")
            ),
            food_id=_optional_str(payload.get("foodId") or payload.get("food_id")),
            quantity=parse_quantity(raw_quantity),
            notes=_optional_str(payload.get("notes")),
        )

    def to_payload(self) -> dict[str, object]:
        """Serialize the record in the flat storage layout."""
        payload: dict[str, object] = {
            "id": self.id,
            "date": self.timestamp,
            "mealType": self.meal_type,
            "foodName": self.food_name,
            "foodId": self.food_id,
            "quantity": self.quantity,
            "notes": self.notes,
        }
        for name in NUTRIENTS:
            payload[name] = self.nutrients.get(name)
        return payload


@dataclass(frozen=True)
class WaterRecord:
    """A hydration entry in millilitres."""

    timestamp: str | None
    amount_ml: object
    id: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "WaterRecord":
        """Build a water record from a stored payload."""
        raw_id = payload.get("id")
        return cls(
            timestamp=_first_str(payload.get("date"), payload.get("timestamp")),
            amount_ml=payload.get("amount"),
            id=str(raw_id) if raw_id is not None else None,
        )

    def to_payload(self) -> dict[str, object]:
        """Serialize the entry in the storage layout."""
        return {"id": self.id, "date": self.timestamp, "amount": self.amount_ml}


@dataclass(frozen=True)
class UserProfile:
    """Daily targets used to contextualize totals."""

    name: str | None = None
    daily_calories_target: float = DEFAULT_CALORIES_TARGET
    daily_protein_target: float = DEFAULT_PROTEIN_TARGET
    daily_carbs_target: float = DEFAULT_CARBS_TARGET
    daily_fat_target: float = DEFAULT_FAT_TARGET
    daily_water_target: float = DEFAULT_WATER_TARGET_ML

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "UserProfile":
        """Build a profile from camelCase or snake_case payload keys."""
        return cls(
            name=_optional_str(payload.get("name")),
            daily_calories_target=_target(
                payload,
                ("dailyCaloriesTarget", "daily_calorie_target"),
                DEFAULT_CALORIES_TARGET,
            ),
            daily_protein_target=_target(
                payload,
                ("dailyProteinTarget", "daily_protein_target"),
                DEFAULT_PROTEIN_TARGET,
            ),
            daily_carbs_target=_target(
                payload,
                ("dailyCarbsTarget", "daily_carbs_target"),
                DEFAULT_CARBS_TARGET,
            ),
            daily_fat_target=_target(
                payload,
                ("dailyFatTarget", "daily_fat_target"),
                DEFAULT_FAT_TARGET,
            ),
            daily_water_target=_target(
                payload,
                ("dailyWaterTarget", "daily_water_target"),
                DEFAULT_WATER_TARGET_ML,
            ),
        )

    def to_payload(self) -> dict[str, object]:
        """Serialize the profile with camelCase keys."""
        return {
            "name": self.name,
            "dailyCaloriesTarget": self.daily_calories_target,
            "dailyProteinTarget": self.daily_protein_target,
            "dailyCarbsTarget": self.daily_carbs_target,
            "dailyFatTarget": self.daily_fat_target,
            "dailyWaterTarget": self.daily_water_target,
        }


def parse_quantity(value: object) -> float:
    """Return a stored serving multiplier, defaulting to one serving."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 1.0
    try:
        quantity = float(value)
    except OverflowError:
        return 1.0
    return quantity if math.isfinite(quantity) else 1.0


def _first_str(*values: object) -> str | None:
    for value in values:
        if isinstance(value, str) and value:
            return value
    return None


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _target(
    payload: Mapping[str, object], keys: tuple[str, ...], default: float
) -> float:
    # Zero or missing targets fall back to the default.
    for key in keys:
        value = payload.get(key)
        if isinstance(value, bool) or not isinstance(value, int | float | str):
            continue
        try:
            parsed = float(value)
        except (OverflowError, ValueError):
            continue
        if math.isfinite(parsed) and parsed > 0:
            return parsed
    return float(default)
