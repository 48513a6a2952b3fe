"""Pydantic models for API request payloads."""

from datetime import date

from pydantic import BaseModel, Field


class WaterEntryRequest(BaseModel):
    """Water intake to log."""

    amount_ml: float
    day: date | None = None


class MealEntryRequest(BaseModel):
    """Meal to log with its nutrient values."""

    day: date
    meal_type: str = "snack"
    food_name: str | None = None
    food_id: str | None = None
    quantity: float = 1.0
    notes: str | None = None
    calories: float = Field(default=0, ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)


class ProfileRequest(BaseModel):
    """Daily targets for the user profile."""

    name: str | None = None
    daily_calories_target: float = Field(default=2200, gt=0)
    daily_protein_target: float = Field(default=150, gt=0)
    daily_carbs_target: float = Field(default=250, gt=0)
    daily_fat_target: float = Field(default=80, gt=0)
    daily_water_target: float = Field(default=2000, gt=0)
