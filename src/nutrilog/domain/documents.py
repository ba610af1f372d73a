"""JSON document form of daily logs, shared by storage and the HTTP API."""

from datetime import date
from uuid import UUID

from nutrilog.domain.diary import (
    MEAL_ORDER,
    DailyLog,
    FoodLogItem,
    Ingredient,
    Meals,
)
from nutrilog.domain.nutrition import ZERO_PROFILE, MacroProfile, parse_unit


def profile_to_dict(profile: MacroProfile) -> dict[str, float]:
    return {
        "calories": profile.calories,
        "protein": profile.protein,
        "carbs": profile.carbs,
        "fat": profile.fat,
    }


def profile_from_dict(raw: object) -> MacroProfile:
    if not isinstance(raw, dict):
        return ZERO_PROFILE
    return MacroProfile(
        calories=float(raw.get("calories") or 0.0),
        protein=float(raw.get("protein") or 0.0),
        carbs=float(raw.get("carbs") or 0.0),
        fat=float(raw.get("fat") or 0.0),
    )


def item_to_dict(item: FoodLogItem) -> dict[str, object]:
    return {
        "_id": str(item.id),
        "foodId": str(item.food_id) if item.food_id else None,
        "name": item.name,
        "amountConsumed": item.amount_consumed,
        "unit": item.unit.value,
        "ingredients": [
            {
                "productId": str(ingredient.product_id),
                "name": ingredient.name,
                "amount": ingredient.amount,
                "unit": ingredient.unit.value,
            }
            for ingredient in item.ingredients
        ],
        "calculatedValues": profile_to_dict(item.calculated_values),
    }


def item_from_dict(raw: dict[str, object]) -> FoodLogItem:
    food_id = raw.get("foodId")
    return FoodLogItem(
        id=UUID(str(raw["_id"])),
        name=str(raw.get("name", "")),
        amount_consumed=float(raw.get("amountConsumed") or 0.0),
        unit=parse_unit(raw.get("unit")),
        calculated_values=profile_from_dict(raw.get("calculatedValues")),
        food_id=UUID(str(food_id)) if food_id else None,
        ingredients=tuple(
            Ingredient(
                product_id=UUID(str(ingredient["productId"])),
                name=ingredient.get("name"),
                amount=float(ingredient.get("amount") or 0.0),
                unit=parse_unit(ingredient.get("unit")),
            )
            for ingredient in raw.get("ingredients") or []
        ),
    )


def meals_to_dict(meals: Meals) -> dict[str, dict[str, list[dict[str, object]]]]:
    return {
        meal_type.value: {
            "items": [item_to_dict(item) for item in meals.get(meal_type, ())]
        }
        for meal_type in MEAL_ORDER
    }


def meals_from_dict(raw: object) -> Meals:
    source = raw if isinstance(raw, dict) else {}
    meals: Meals = {}
    for meal_type in MEAL_ORDER:
        bucket = source.get(meal_type.value) or {}
        meals[meal_type] = tuple(
            item_from_dict(item) for item in bucket.get("items") or []
        )
    return meals


def log_to_dict(log: DailyLog) -> dict[str, object]:
    """Return the client-facing shape of a daily log."""
    return {
        "id": str(log.id) if log.id else None,
        "userId": str(log.user_id),
        "date": log.day.isoformat(),
        "meals": meals_to_dict(log.meals),
        "totals": profile_to_dict(log.totals),
    }


def log_from_row(row: dict[str, object]) -> DailyLog:
    """Build a daily log from a stored row."""
    return DailyLog(
        id=UUID(str(row["id"])) if row.get("id") else None,
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["day"])[:10]),
        meals=meals_from_dict(row.get("meals")),
        totals=profile_from_dict(row.get("totals")),
    )
