"""Daily log service: item mutations and totals recomputation."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import UUID, uuid4

from nutrilog.domain.diary import (
    MEAL_ORDER,
    CompositeIngredientsUpdate,
    DailyLog,
    FoodLogItem,
    IngredientRequest,
    Meals,
    MealType,
    SimpleAmountUpdate,
    UpdateRequest,
    empty_meals,
)
from nutrilog.domain.nutrition import ZERO_PROFILE, MacroProfile, Unit
from nutrilog.domain.products import Product
from nutrilog.errors import InvalidInputError, NotFoundError
from nutrilog.services.nutrition import (
    ResolvedIngredient,
    aggregate_ingredients,
    calculate,
    round_profile,
    scale_linear,
)

_logger = logging.getLogger(__name__)


class DailyLogRepository(Protocol):
    """Persistence interface for daily logs."""

    def find_by_user_and_day(self, user_id: UUID, day: date) -> DailyLog | None:
        """Return the log for a user and calendar day, if present."""

    def save(self, log: DailyLog) -> DailyLog:
        """Write the whole log in one operation, keyed by user and day."""

    def list_between(self, user_id: UUID, start: date, end: date) -> list[DailyLog]:
        """Return logs for days in ``[start, end)``."""


class ProductLookup(Protocol):
    """Read access to products referenced by log items."""

    def get_product(self, product_id: UUID) -> Product | None:
        """Return a product by id, if present."""


def recompute_totals(meals: Meals) -> MacroProfile:
    """Sum every item's calculated values and round once.

    Totals are always rebuilt from the items, never adjusted in place.
    """
    raw = ZERO_PROFILE
    for meal_type in MEAL_ORDER:
        for item in meals.get(meal_type, ()):
            raw = raw + item.calculated_values
    return round_profile(raw)


@dataclass
class DiaryService:
    """Applies add, update and remove operations to daily logs."""

    repository: DailyLogRepository
    products: ProductLookup

    def get_or_create_log(self, user_id: UUID, day: date) -> DailyLog:
        """Return the log for the day, creating an empty one when absent."""
        existing = self.repository.find_by_user_and_day(user_id, day)
        if existing is not None:
            return existing
        _logger.info("Creating daily log: user_id=%s day=%s", user_id, day)
        return self.repository.save(DailyLog(user_id=user_id, day=day))

    def get_daily_log(self, user_id: UUID, day: date) -> DailyLog:
        """Return the log for the day."""
        return self.get_or_create_log(user_id, day)

    def add_food_item(
        self,
        user_id: UUID,
        day: date,
        meal_type: MealType,
        product_id: UUID,
        amount: float,
    ) -> DailyLog:
        """Log an amount of a single product."""
        log = self.get_or_create_log(user_id, day)
        product = self.products.get_product(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        item = FoodLogItem(
            id=uuid4(),
            name=product.name,
            amount_consumed=amount,
            unit=product.unit,
            calculated_values=calculate(product.values, amount, product.unit),
            food_id=product.id,
        )
        return self._save_bucket(log, meal_type, (*log.items(meal_type), item))

    def add_composite_food(
        self,
        user_id: UUID,
        day: date,
        meal_type: MealType,
        name: str,
        ingredients: list[IngredientRequest],
    ) -> DailyLog:
        """Log a dish made of several products.

        Ingredients whose product no longer exists are left out of the dish.
        """
        if not name or not name.strip():
            raise InvalidInputError("Composite food name is required")
        log = self.get_or_create_log(user_id, day)
        result = aggregate_ingredients(self._resolve_ingredients(ingredients))
        item = FoodLogItem(
            id=uuid4(),
            name=name.strip(),
            amount_consumed=result.total_amount,
            unit=Unit.GRAM,
            calculated_values=result.calculated_values,
            ingredients=result.ingredients,
        )
        return self._save_bucket(log, meal_type, (*log.items(meal_type), item))

    def update_food_item(
        self,
        user_id: UUID,
        day: date,
        meal_type: MealType,
        item_id: UUID,
        update: UpdateRequest,
    ) -> DailyLog:
        """Change an item's amount or ingredients and refresh totals."""
        log = self.get_or_create_log(user_id, day)
        items = log.items(meal_type)
        index = next((i for i, item in enumerate(items) if item.id == item_id), None)
        if index is None:
            raise NotFoundError("Item not found")
        updated = self._apply_update(items[index], update)
        return self._save_bucket(
            log, meal_type, (*items[:index], updated, *items[index + 1 :])
        )

    def remove_food_item(
        self, user_id: UUID, day: date, meal_type: MealType, item_id: UUID
    ) -> DailyLog:
        """Remove an item; unknown ids leave the log unchanged."""
        log = self.get_or_create_log(user_id, day)
        remaining = tuple(item for item in log.items(meal_type) if item.id != item_id)
        return self._save_bucket(log, meal_type, remaining)

    def _apply_update(self, item: FoodLogItem, update: UpdateRequest) -> FoodLogItem:
        if isinstance(update, CompositeIngredientsUpdate):
            if not item.is_composite:
                return item
            result = aggregate_ingredients(
                self._resolve_ingredients(list(update.ingredients))
            )
            return replace(
                item,
                ingredients=result.ingredients,
                amount_consumed=result.total_amount,
                calculated_values=result.calculated_values,
            )
        if not isinstance(update, SimpleAmountUpdate) or update.amount <= 0:
            return item
        if item.food_id is not None:
            product = self.products.get_product(item.food_id)
            if product is None:
                _logger.warning(
                    "Product missing for log item, keeping values: item_id=%s",
                    item.id,
                )
                return item
            return replace(
                item,
                amount_consumed=update.amount,
                calculated_values=calculate(
                    product.values, update.amount, product.unit
                ),
            )
        if item.amount_consumed <= 0:
            return item
        ratio = update.amount / item.amount_consumed
        _logger.warning(
            "Rescaling log item without product reference: item_id=%s ratio=%s",
            item.id,
            ratio,
        )
        return replace(
            item,
            amount_consumed=update.amount,
            calculated_values=scale_linear(item.calculated_values, ratio),
        )

    def _resolve_ingredients(
        self, ingredients: list[IngredientRequest]
    ) -> list[ResolvedIngredient]:
        resolved: list[ResolvedIngredient] = []
        for ingredient in ingredients:
            product = self.products.get_product(ingredient.product_id)
            if product is None:
                _logger.debug(
                    "Skipping unknown ingredient product: product_id=%s",
                    ingredient.product_id,
                )
                continue
            resolved.append(
                ResolvedIngredient(product=product, amount=ingredient.amount)
            )
        return resolved

    def _save_bucket(
        self, log: DailyLog, meal_type: MealType, items: tuple[FoodLogItem, ...]
    ) -> DailyLog:
        meals = {**empty_meals(), **log.meals, meal_type: items}
        return self.repository.save(
            replace(log, meals=meals, totals=recompute_totals(meals))
        )
