"""Services for managing the product catalog."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID, uuid4

from nutrilog.domain.nutrition import MacroProfile, parse_unit
from nutrilog.domain.products import Product
from nutrilog.domain.profiles import UserRecord
from nutrilog.errors import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)

_logger = logging.getLogger(__name__)


class ProductRepository(Protocol):
    """Persistence interface for products."""

    def get_product(self, product_id: UUID) -> Product | None:
        """Return a product by id, if present."""

    def find_by_name(
        self, name: str, *, is_custom: bool, created_by: UUID | None
    ) -> Product | None:
        """Return a product with this name in the given scope.

        ``created_by`` of None matches any creator.
        """

    def list_visible(self, user_id: UUID) -> list[Product]:
        """Return global products plus the user's custom products."""

    def create_product(self, product: Product) -> Product:
        """Insert a product and return it."""

    def update_product(self, product: Product) -> Product:
        """Replace a product's fields and return it."""

    def delete_product(self, product_id: UUID) -> None:
        """Delete a product."""


@dataclass
class ProductService:
    """Application service for catalog operations."""

    repository: ProductRepository

    def get_product(self, product_id: UUID) -> Product | None:
        """Return a product by id, if present."""
        return self.repository.get_product(product_id)

    def list_products(self, user_id: UUID) -> list[Product]:
        """Return products visible to the user sorted by name."""
        return sorted(
            self.repository.list_visible(user_id), key=lambda item: item.name.lower()
        )

    def create_product(
        self, user_id: UUID, payload: dict[str, object], is_global: bool = False
    ) -> Product:
        """Create a custom product, or a global one for admin requests."""
        name = str(payload.get("name") or "").strip()
        if not name:
            raise InvalidInputError("Product name is required")
        values = _parse_values(payload.get("values"), MacroProfile(0, 0, 0, 0))
        _validate_values(values)
        if self.repository.find_by_name(name, is_custom=True, created_by=user_id):
            raise ConflictError(
                "A product with this name already exists for this user."
            )
        if is_global and self.repository.find_by_name(
            name, is_custom=False, created_by=None
        ):
            raise ConflictError("A global product with this name already exists.")
        product = Product(
            id=uuid4(),
            name=name,
            values=values,
            unit=parse_unit(payload.get("unit")),
            is_custom=not is_global,
            created_by=user_id,
        )
        _logger.info("Creating product: name=%s global=%s", name, is_global)
        return self.repository.create_product(product)

    def update_product(
        self, product_id: UUID, updates: dict[str, object], user: UserRecord
    ) -> Product:
        """Update a product owned by the user, or any product for admins."""
        product = self.repository.get_product(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        if not user.is_admin and product.created_by != user.id:
            raise ForbiddenError(
                "Unauthorized: You can only update products you created."
            )
        name = str(updates.get("name") or product.name).strip()
        if name != product.name:
            duplicate = self.repository.find_by_name(
                name, is_custom=product.is_custom, created_by=product.created_by
            )
            if duplicate and duplicate.id != product.id:
                raise ConflictError("Another product with this name already exists.")
        values = _parse_values(updates.get("values"), product.values)
        _validate_values(values)
        unit = parse_unit(updates["unit"]) if updates.get("unit") else product.unit
        return self.repository.update_product(
            replace(product, name=name, values=values, unit=unit)
        )

    def delete_product(self, product_id: UUID, user: UserRecord) -> None:
        """Delete a product the user created; system products need an admin."""
        product = self.repository.get_product(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        if not user.is_admin and product.created_by != user.id:
            if product.created_by is None:
                raise ForbiddenError(
                    "Unauthorized: This product is a core system item "
                    "and cannot be deleted."
                )
            raise ForbiddenError(
                "Unauthorized: You can only delete products you created."
            )
        self.repository.delete_product(product_id)


def _parse_values(raw: object, current: MacroProfile) -> MacroProfile:
    """Merge a partial values mapping onto ``current``."""
    if not isinstance(raw, dict):
        return current
    try:
        return MacroProfile(
            calories=float(raw.get("calories", current.calories)),
            protein=float(raw.get("protein", current.protein)),
            carbs=float(raw.get("carbs", current.carbs)),
            fat=float(raw.get("fat", current.fat)),
        )
    except (TypeError, ValueError) as exc:
        raise InvalidInputError("Nutritional values must be numbers.") from exc


def _validate_values(values: MacroProfile) -> None:
    if min(values.calories, values.protein, values.carbs, values.fat) < 0:
        raise InvalidInputError("Nutritional values must be non-negative.")
