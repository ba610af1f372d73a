"""Domain models for the daily food log."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from nutrilog.domain.nutrition import ZERO_PROFILE, MacroProfile, Unit


class MealType(StrEnum):
    """Meal buckets of a daily log."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


MEAL_ORDER: tuple[MealType, ...] = (
    MealType.BREAKFAST,
    MealType.LUNCH,
    MealType.DINNER,
    MealType.SNACK,
)


@dataclass(frozen=True)
class Ingredient:
    """One product inside a composite item, kept verbatim for editing."""

    product_id: UUID
    amount: float
    name: str | None = None
    unit: Unit = Unit.GRAM


@dataclass(frozen=True)
class FoodLogItem:
    """An entry in a meal bucket.

    Simple items reference a product through ``food_id``. Composite items carry
    a non-empty ``ingredients`` tuple and no product reference. Items without
    either come from older records and can only be rescaled linearly.
    """

    id: UUID
    name: str
    amount_consumed: float
    calculated_values: MacroProfile
    unit: Unit = Unit.GRAM
    food_id: UUID | None = None
    ingredients: tuple[Ingredient, ...] = ()

    @property
    def is_composite(self) -> bool:
        return bool(self.ingredients)


Meals = dict[MealType, tuple[FoodLogItem, ...]]


def empty_meals() -> Meals:
    """Return four empty meal buckets."""
    return {meal_type: () for meal_type in MEAL_ORDER}


@dataclass(frozen=True)
class DailyLog:
    """All meals logged by one user on one calendar day."""

    user_id: UUID
    day: date
    meals: Meals = field(default_factory=empty_meals)
    totals: MacroProfile = ZERO_PROFILE
    id: UUID | None = None

    def items(self, meal_type: MealType) -> tuple[FoodLogItem, ...]:
        return self.meals.get(meal_type, ())


@dataclass(frozen=True)
class SimpleAmountUpdate:
    """Change the consumed amount of an item."""

    amount: float


@dataclass(frozen=True)
class IngredientRequest:
    """Ingredient reference as sent by a client, before product lookup."""

    product_id: UUID
    amount: float


@dataclass(frozen=True)
class CompositeIngredientsUpdate:
    """Replace the ingredient list of a composite item."""

    ingredients: tuple[IngredientRequest, ...]


UpdateRequest = SimpleAmountUpdate | CompositeIngredientsUpdate


def log_day(value: date | datetime) -> date:
    """Truncate a timestamp to the calendar day that keys a daily log."""
    if isinstance(value, datetime):
        return value.date()
    return value
