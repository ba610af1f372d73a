"""Nutrient calculation for consumed amounts and composite foods."""

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from nutrilog.domain.diary import Ingredient
from nutrilog.domain.nutrition import ZERO_PROFILE, MacroProfile, Unit
from nutrilog.domain.products import Product

_logger = logging.getLogger(__name__)

# Binary float noise (0.3 * 1.5 == 0.44999999999999996) is dropped at this
# precision before half-up rounding.
_NOISE_DIGITS = 9
_CALORIE_QUANTUM = Decimal("1")
_MACRO_QUANTUM = Decimal("0.1")


@dataclass(frozen=True)
class ResolvedIngredient:
    """An ingredient paired with the product it references."""

    product: Product
    amount: float


@dataclass(frozen=True)
class CompositeResult:
    """Rounded values, total amount and retained ingredients of a composite."""

    calculated_values: MacroProfile
    total_amount: float
    ingredients: tuple[Ingredient, ...]


def round_half_up(value: float, quantum: Decimal) -> float:
    """Round to the given quantum with halves away from zero."""
    cleaned = Decimal(repr(round(value, _NOISE_DIGITS)))
    return float(cleaned.quantize(quantum, rounding=ROUND_HALF_UP))


def round_profile(raw: MacroProfile) -> MacroProfile:
    """Round calories to an integer and macros to one decimal place."""
    return MacroProfile(
        calories=round_half_up(raw.calories, _CALORIE_QUANTUM),
        protein=round_half_up(raw.protein, _MACRO_QUANTUM),
        carbs=round_half_up(raw.carbs, _MACRO_QUANTUM),
        fat=round_half_up(raw.fat, _MACRO_QUANTUM),
    )


def scale(profile: MacroProfile, amount: float, unit: Unit) -> MacroProfile:
    """Return the unrounded values for ``amount`` of a product."""
    if amount <= 0:
        return ZERO_PROFILE
    ratio = amount if unit == Unit.COUNT else amount / 100
    return MacroProfile(
        calories=profile.calories * ratio,
        protein=profile.protein * ratio,
        carbs=profile.carbs * ratio,
        fat=profile.fat * ratio,
    )


def calculate(profile: MacroProfile, amount: float, unit: Unit) -> MacroProfile:
    """Return rounded values for ``amount`` of a product.

    Gram and millilitre profiles are defined per 100, count profiles per 1.
    A non-positive amount means nothing was consumed and yields zeros.
    """
    return round_profile(scale(profile, amount, unit))


def scale_linear(values: MacroProfile, ratio: float) -> MacroProfile:
    """Rescale already calculated values by ``ratio`` and round each field.

    Used for items that lost their product reference. Rounding compounds when
    this is applied repeatedly to its own output.
    """
    return round_profile(
        MacroProfile(
            calories=values.calories * ratio,
            protein=values.protein * ratio,
            carbs=values.carbs * ratio,
            fat=values.fat * ratio,
        )
    )


def aggregate_ingredients(ingredients: list[ResolvedIngredient]) -> CompositeResult:
    """Sum raw ingredient values and round the sum once.

    Rounding after the sum keeps small contributions: two ingredients with
    0.04 g protein each give 0.1 g, not 0.0 g. Amounts are added as-is across
    units.
    """
    raw_total = ZERO_PROFILE
    total_amount = 0.0
    retained: list[Ingredient] = []
    for ingredient in ingredients:
        product = ingredient.product
        raw_total = raw_total + scale(product.values, ingredient.amount, product.unit)
        total_amount += ingredient.amount
        retained.append(
            Ingredient(
                product_id=product.id,
                name=product.name,
                amount=ingredient.amount,
                unit=product.unit,
            )
        )
    _logger.debug(
        "Aggregated composite: ingredients=%s total_amount=%s",
        len(retained),
        total_amount,
    )
    return CompositeResult(
        calculated_values=round_profile(raw_total),
        total_amount=total_amount,
        ingredients=tuple(retained),
    )
