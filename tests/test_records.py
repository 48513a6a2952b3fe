"""Tests for record payload parsing."""

from diet_tracker.domain.records import MealRecord, UserProfile, WaterRecord


def test_meal_from_flat_payload() -> None:
    record = MealRecord.from_payload(
        {
            "date": "2024-01-01",
            "mealType": "dinner",
            "foodName": "Dosa",
            "calories": 168,
            "protein": 4.0,
            "carbs": 22.0,
            "fat": 7.4,
        }
    )

    assert record.timestamp == "2024-01-01"
    assert record.meal_type == "dinner"
    assert record.food_name == "Dosa"
    assert record.nutrients["fat"] == 7.4


def test_meal_from_nested_payload_with_timestamp() -> None:
    record = MealRecord.from_payload(
        {
            "timestamp": "2024-01-01T08:15:00.000Z",
            "meal_type": "breakfast",
            "nutrients": {"calories": 58, "protein": 2.0},
        }
    )

    assert record.timestamp == "2024-01-01T08:15:00.000Z"
    assert record.nutrients == {
        "calories": 58,
        "protein": 2.0,
        "carbs": None,
        "fat": None,
    }


def test_meal_payload_roundtrip_keeps_nutrients() -> None:
    record = MealRecord(
        timestamp="2024-02-02",
        meal_type="lunch",
        nutrients={"calories": 130, "protein": 2.7, "carbs": 28, "fat": 0.3},
        id="abc",
    )

    assert MealRecord.from_payload(record.to_payload()) == record


def test_water_from_payload() -> None:
    entry = WaterRecord.from_payload({"amount": 250, "timestamp": "2024-01-01T10:00"})

    assert entry.amount_ml == 250
    assert entry.timestamp == "2024-01-01T10:00"


def test_profile_targets_fall_back_to_defaults() -> None:
    profile = UserProfile.from_payload(
        {
            "daily_calorie_target": 1800,
            "dailyProteinTarget": "120",
            "daily_carbs_target": 0,
            "daily_fat_target": None,
        }
    )

    assert profile.daily_calories_target == 1800
    assert profile.daily_protein_target == 120
    assert profile.daily_carbs_target == 250
    assert profile.daily_fat_target == 80
    assert profile.daily_water_target == 2000


def test_out_of_range_numbers_fall_back_to_defaults() -> None:
    profile = UserProfile.from_payload(
        {"daily_calorie_target": 10**400, "daily_water_target": "inf"}
    )
    record = MealRecord.from_payload({"date": "2024-01-01", "quantity": 10**400})

    assert profile.daily_calories_target == 2200
    assert profile.daily_water_target == 2000
    assert record.quantity == 1.0
