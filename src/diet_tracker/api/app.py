"""FastAPI application factory."""

import logging
from datetime import date

from fastapi import FastAPI, HTTPException, Query, Request, status

from diet_tracker.api.models import (
    MealEntryRequest,
    ProfileRequest,
    WaterEntryRequest,
)
from diet_tracker.app_logging import configure_logging
from diet_tracker.containers import AppContainer
from diet_tracker.domain.aggregation import ALL_NUTRIENTS
from diet_tracker.domain.records import MealRecord, UserProfile, WaterRecord
from diet_tracker.domain.stats import ChartData
from diet_tracker.services.stats import DailySummary

MAX_WINDOW_DAYS = 366
UNPROCESSABLE = 422


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    settings = container.settings
    configure_logging(logging.DEBUG if settings.debug else settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/summary")
    async def daily_summary(
        request: Request, day: date | None = None
    ) -> dict[str, object]:
        """Return the nutrition and hydration summary for a day."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.stats_service.get_daily_summary(day)
        return _serialize_summary(summary)

    @app.get("/charts/monthly")
    async def monthly_chart(
        request: Request,
        end_day: date | None = None,
        nutrient: str = ALL_NUTRIENTS,
        window_days: int | None = Query(default=None, ge=1, le=MAX_WINDOW_DAYS),
    ) -> dict[str, object]:
        """Return daily series and axis scale for the trend chart."""
        state_container: AppContainer = request.app.state.container
        settings = state_container.settings
        try:
            chart = state_container.stats_service.get_monthly_chart(
                end_day=end_day,
                nutrient=nutrient,
                window_size_days=window_days or settings.chart_window_days,
                label_every=settings.chart_label_every,
            )
        except ValueError as exc:
            raise HTTPException(status_code=UNPROCESSABLE, detail=str(exc)) from exc
        return _serialize_chart(chart)

    @app.post("/water", status_code=status.HTTP_201_CREATED)
    async def log_water(
        payload: WaterEntryRequest, request: Request
    ) -> dict[str, object]:
        """Log a water intake entry."""
        state_container: AppContainer = request.app.state.container
        day = payload.day or state_container.stats_service.today()
        try:
            entry = state_container.entry_service.log_water(payload.amount_ml, day)
        except ValueError as exc:
            raise HTTPException(status_code=UNPROCESSABLE, detail=str(exc)) from exc
        except RuntimeError as exc:
            logger.exception("Failed to store water entry")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        return _serialize_water(entry)

    @app.post("/meals", status_code=status.HTTP_201_CREATED)
    async def log_meal(
        payload: MealEntryRequest, request: Request
    ) -> dict[str, object]:
        """Log a meal with its nutrient values."""
        state_container: AppContainer = request.app.state.container
        meal = MealRecord(
            timestamp=payload.day.isoformat(),
            meal_type=payload.meal_type,
            nutrients={
                "calories": payload.calories,
                "protein": payload.protein,
                "carbs": payload.carbs,
                "fat": payload.fat,
            },
            food_name=payload.food_name,
            food_id=payload.food_id,
            quantity=payload.quantity,
            notes=payload.notes,
        )
        try:
            saved = state_container.entry_service.log_meal(meal)
        except ValueError as exc:
            raise HTTPException(status_code=UNPROCESSABLE, detail=str(exc)) from exc
        except RuntimeError as exc:
            logger.exception("Failed to store meal entry")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        return _serialize_meal(saved)

    @app.put("/profile")
    async def save_profile(
        payload: ProfileRequest, request: Request
    ) -> dict[str, object]:
        """Replace the user's daily targets."""
        state_container: AppContainer = request.app.state.container
        try:
            profile = state_container.entry_service.save_profile(
                UserProfile(**payload.model_dump())
            )
        except RuntimeError as exc:
            logger.exception("Failed to store user profile")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        return _serialize_profile(profile)

    return app


def _serialize_summary(summary: DailySummary) -> dict[str, object]:
    split = summary.macro_split
    return {
        "day": summary.day.isoformat(),
        "totals": summary.totals.as_dict(),
        "exact": {
            "calories": summary.exact.calories,
            "protein": summary.exact.protein,
            "carbs": summary.exact.carbs,
            "fat": summary.exact.fat,
        },
        "calories_by_meal_type": summary.calories_by_meal_type,
        "totals_by_meal_type": {
            name: totals.as_dict()
            for name, totals in summary.totals_by_meal_type.items()
        },
        "water_ml": summary.water_ml,
        "targets": _serialize_profile(summary.targets),
        "macro_split": {
            "protein_kcal": split.protein_kcal,
            "carbs_kcal": split.carbs_kcal,
            "fat_kcal": split.fat_kcal,
            "protein_percent": split.protein_percent,
            "carbs_percent": split.carbs_percent,
            "fat_percent": split.fat_percent,
        },
        "hydration": {
            "current_ml": summary.hydration.current_ml,
            "goal_ml": summary.hydration.goal_ml,
            "percent": summary.hydration.percent,
            "status": summary.hydration.status,
        },
        "meals": [_serialize_meal(meal) for meal in summary.meals],
    }


def _serialize_chart(chart: ChartData) -> dict[str, object]:
    return {
        "labels": chart.labels,
        "days": [point.day.isoformat() for point in chart.datasets[0].points],
        "datasets": [
            {"nutrient": series.nutrient, "data": series.values}
            for series in chart.datasets
        ],
        "meta": {"y_step": chart.axis.step, "y_max": chart.axis.max},
        "summaries": [
            {
                "nutrient": summary.nutrient,
                "average": summary.average,
                "logged_day_average": summary.logged_day_average,
                "logged_days": summary.logged_days,
                "trend_percent": summary.trend_percent,
            }
            for summary in chart.summaries
        ],
    }


def _serialize_meal(meal: MealRecord) -> dict[str, object]:
    return meal.to_payload()


def _serialize_water(entry: WaterRecord) -> dict[str, object]:
    return entry.to_payload()


def _serialize_profile(profile: UserProfile) -> dict[str, object]:
    return {
        "name": profile.name,
        "daily_calories_target": profile.daily_calories_target,
        "daily_protein_target": profile.daily_protein_target,
        "daily_carbs_target": profile.daily_carbs_target,
        "daily_fat_target": profile.daily_fat_target,
        "daily_water_target": profile.daily_water_target,
    }
