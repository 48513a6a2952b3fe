"""Supabase repository for meal, water and profile records."""

from dataclasses import dataclass, replace

from supabase import Client

from diet_tracker.domain.filters import DAY_KEY_LENGTH
from diet_tracker.domain.records import (
    NUTRIENTS,
    MealRecord,
    UserProfile,
    WaterRecord,
    parse_quantity,
)
from diet_tracker.services.entries import EntryRepository
from diet_tracker.services.stats import RecordRepository

_MEAL_COLUMNS = (
    "id, food_id, meal_type, quantity, date, notes, "
    "foods (name, calories, protein, carbs, fat)"
)


@dataclass
class SupabaseRecordRepository(RecordRepository, EntryRepository):
    """Supabase implementation scoped to a single user."""

    client: Client
    user_id: str

    def list_meals(self) -> list[MealRecord]:
        """Return all meal entries with nutrients scaled by quantity."""
        response = (
            self.client.table("meal_entries")
            .select(_MEAL_COLUMNS)
            .eq("user_id", self.user_id)
            .order("date", desc=True)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def list_water_entries(self) -> list[WaterRecord]:
        """Return all water entries."""
        response = (
            self.client.table("water_entries")
            .select("id, amount, date, time")
            .eq("user_id", self.user_id)
            .order("date", desc=False)
            .execute()
        )
        return [WaterRecord.from_payload(row) for row in response.data or []]

    def get_profile(self) -> UserProfile | None:
        """Return the user's profile row, if present."""
        response = (
            self.client.table("user_profiles")
            .select("*")
            .eq("user_id", self.user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return UserProfile.from_payload(response.data[0])

    def save_meal(self, meal: MealRecord) -> MealRecord:
        """Insert a meal entry referencing a stored food."""
        if not meal.food_id:
            raise ValueError("Supabase meal entries require a food id.")
        response = (
            self.client.table("meal_entries")
            .insert(
                {
                    "user_id": self.user_id,
                    "food_id": meal.food_id,
                    "meal_type": meal.meal_type or "snack",
                    "quantity": meal.quantity,
                    "date": (meal.timestamp or "")[:DAY_KEY_LENGTH],
                    "notes": meal.notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal entry")
        return replace(meal, id=str(response.data[0]["id"]))

    def save_water_entry(self, entry: WaterRecord) -> WaterRecord:
        """Insert a water entry."""
        response = (
            self.client.table("water_entries")
            .insert(
                {
                    "user_id": self.user_id,
                    "amount": entry.amount_ml,
                    "date": entry.timestamp,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create water entry")
        return replace(entry, id=str(response.data[0]["id"]))

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Insert or update the user's profile row."""
        response = (
            self.client.table("user_profiles")
            .upsert(
                {
                    "user_id": self.user_id,
                    "name": profile.name,
                    "daily_calorie_target": profile.daily_calories_target,
                    "daily_protein_target": profile.daily_protein_target,
                    "daily_carbs_target": profile.daily_carbs_target,
                    "daily_fat_target": profile.daily_fat_target,
                    "daily_water_target": profile.daily_water_target,
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save user profile")
        return UserProfile.from_payload(response.data[0])


def _parse_meal(row: dict[str, object]) -> MealRecord:
    food = row.get("foods")
    if not isinstance(food, dict):
        food = {}
    quantity = parse_quantity(row.get("quantity"))
    nutrients = {name: _scaled(food.get(name), quantity) for name in NUTRIENTS}
    date_raw = row.get("date")
    meal_type = row.get("meal_type")
    notes = row.get("notes")
    food_id = row.get("food_id")
    return MealRecord(
        timestamp=date_raw if isinstance(date_raw, str) else None,
        meal_type=meal_type if isinstance(meal_type, str) else None,
        nutrients=nutrients,
        id=str(row["id"]) if row.get("id") is not None else None,
        food_name=str(food.get("name") or "Unknown Food"),
        food_id=str(food_id) if food_id is not None else None,
        quantity=quantity,
        notes=notes if isinstance(notes, str) else None,
    )


def _scaled(value: object, quantity: float) -> float | None:
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        return None
    try:
        return float(value) * quantity
    except (OverflowError, ValueError):
        return None
