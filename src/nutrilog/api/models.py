"""Pydantic models for API request payloads."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from nutrilog.domain.diary import (
    CompositeIngredientsUpdate,
    IngredientRequest,
    MealType,
    SimpleAmountUpdate,
    UpdateRequest,
)
from nutrilog.domain.nutrition import Unit
from nutrilog.errors import InvalidInputError


class ApiModel(BaseModel):
    """Base model accepting camelCase aliases or field names."""

    model_config = ConfigDict(populate_by_name=True)


class DiaryRequest(ApiModel):
    """Fields shared by all diary mutations."""

    day: str = Field(alias="date", min_length=1)
    meal_type: MealType = Field(alias="mealType")


class IngredientPayload(ApiModel):
    """Ingredient of a composite food."""

    product_id: UUID = Field(alias="productId")
    amount: float

    def to_request(self) -> IngredientRequest:
        return IngredientRequest(product_id=self.product_id, amount=self.amount)


class AddItemRequest(DiaryRequest):
    """Add an amount of one product."""

    product_id: UUID = Field(alias="productId")
    amount: float


class AddCompositeRequest(DiaryRequest):
    """Add a dish built from several products."""

    name: str = Field(min_length=1)
    ingredients: list[IngredientPayload] = Field(default_factory=list)


class AmountPayload(ApiModel):
    """Object form of an update: a new amount or new ingredients."""

    amount: float | None = None
    ingredients: list[IngredientPayload] | None = None


class UpdateItemRequest(DiaryRequest):
    """Update an item; ``amount`` may be a number or an object."""

    amount: float | AmountPayload | None = None
    ingredients: list[IngredientPayload] | None = None

    def to_update(self) -> UpdateRequest:
        """Resolve the payload into one update variant."""
        ingredients = self.ingredients
        amount = self.amount
        if isinstance(amount, AmountPayload):
            if ingredients is None:
                ingredients = amount.ingredients
            amount = amount.amount
        if ingredients is not None:
            return CompositeIngredientsUpdate(
                ingredients=tuple(item.to_request() for item in ingredients)
            )
        if amount is not None:
            return SimpleAmountUpdate(amount=amount)
        raise InvalidInputError("An amount or ingredients list is required")


class RemoveItemRequest(DiaryRequest):
    """Locate an item to remove."""


class ValuesPayload(ApiModel):
    """Nutritional values per 100 g/ml or per unit."""

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


class ProductRequest(ApiModel):
    """Create or update a product."""

    name: str | None = None
    values: ValuesPayload | None = Field(default=None, alias="valuesPer100g")
    unit: Unit | None = None
    is_global: bool = Field(default=False, alias="isGlobal")

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {}
        if self.name is not None:
            payload["name"] = self.name
        if self.values is not None:
            payload["values"] = self.values.model_dump(exclude_none=True)
        if self.unit is not None:
            payload["unit"] = self.unit
        return payload


class RegisterRequest(ApiModel):
    """Register a user."""

    email: str
    full_name: str = Field(alias="fullName")


class SetPayload(ApiModel):
    """A set within an exercise."""

    reps: int = Field(ge=1)
    weight: float = Field(default=0.0, ge=0)


class ExercisePayload(ApiModel):
    """An exercise with its sets."""

    name: str = Field(min_length=1)
    sets: list[SetPayload] = Field(default_factory=list)


class WorkoutRequest(ApiModel):
    """Create or update a workout."""

    day: str | None = Field(default=None, alias="date")
    name: str | None = None
    duration_minutes: int | None = Field(default=None, alias="duration", ge=0)
    exercises: list[ExercisePayload] | None = None
