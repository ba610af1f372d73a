"""Nutrition domain models."""

from dataclasses import dataclass
from enum import StrEnum


class Unit(StrEnum):
    """Basis a product's nutritional values are defined against."""

    GRAM = "gram"
    MILLILITER = "ml"
    COUNT = "unit"


@dataclass(frozen=True)
class MacroProfile:
    """Calories and macronutrients, either per basis or for a consumed amount."""

    calories: float
    protein: float
    carbs: float
    fat: float

    def __add__(self, other: "MacroProfile") -> "MacroProfile":
        return MacroProfile(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
        )


ZERO_PROFILE = MacroProfile(0.0, 0.0, 0.0, 0.0)


def parse_unit(value: object) -> Unit:
    """Return the unit for a stored value, defaulting to grams."""
    if isinstance(value, Unit):
        return value
    try:
        return Unit(str(value))
    except ValueError:
        return Unit.GRAM
