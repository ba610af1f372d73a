"""Supabase repository for the product catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrilog.domain.nutrition import MacroProfile, parse_unit
from nutrilog.domain.products import Product
from nutrilog.services.products import ProductRepository

_COLUMNS = "id, name, is_custom, created_by, unit, calories, protein, carbs, fat"


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase implementation for products."""

    client: Client

    def get_product(self, product_id: UUID) -> Product | None:
        """Return a product by id."""
        response = (
            self.client.table("products")
            .select(_COLUMNS)
            .eq("id", str(product_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_product(response.data[0])

    def find_by_name(
        self, name: str, *, is_custom: bool, created_by: UUID | None
    ) -> Product | None:
        """Return a product with this name in the given scope."""
        query = (
            self.client.table("products")
            .select(_COLUMNS)
            .eq("name", name)
            .eq("is_custom", is_custom)
        )
        if created_by is not None:
            query = query.eq("created_by", str(created_by))
        response = query.limit(1).execute()
        if not response.data:
            return None
        return _parse_product(response.data[0])

    def list_visible(self, user_id: UUID) -> list[Product]:
        """Return global products and the user's custom products."""
        response = (
            self.client.table("products")
            .select(_COLUMNS)
            .or_(f"is_custom.eq.false,created_by.eq.{user_id}")
            .order("name", desc=False)
            .execute()
        )
        return [_parse_product(row) for row in response.data or []]

    def create_product(self, product: Product) -> Product:
        """Insert a product row."""
        response = (
            self.client.table("products")
            .insert({"id": str(product.id), **_to_row(product)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create product")
        return _parse_product(response.data[0])

    def update_product(self, product: Product) -> Product:
        """Update a product row."""
        response = (
            self.client.table("products")
            .update(_to_row(product))
            .eq("id", str(product.id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update product")
        return _parse_product(response.data[0])

    def delete_product(self, product_id: UUID) -> None:
        """Delete a product row."""
        self.client.table("products").delete().eq("id", str(product_id)).execute()


def _to_row(product: Product) -> dict[str, object]:
    return {
        "name": product.name,
        "is_custom": product.is_custom,
        "created_by": str(product.created_by) if product.created_by else None,
        "unit": product.unit.value,
        "calories": product.values.calories,
        "protein": product.values.protein,
        "carbs": product.values.carbs,
        "fat": product.values.fat,
    }


def _parse_product(row: dict[str, object]) -> Product:
    return Product(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        values=MacroProfile(
            calories=float(row.get("calories") or 0.0),
            protein=float(row.get("protein") or 0.0),
            carbs=float(row.get("carbs") or 0.0),
            fat=float(row.get("fat") or 0.0),
        ),
        unit=parse_unit(row.get("unit")),
        is_custom=bool(row.get("is_custom", True)),
        created_by=UUID(row["created_by"]) if row.get("created_by") else None,
    )
