"""Product catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from nutrilog.api.dependencies import require_user
from nutrilog.api.models import ProductRequest  # noqa: TC001
from nutrilog.domain.documents import profile_to_dict
from nutrilog.errors import ForbiddenError

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer
    from nutrilog.domain.products import Product

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
async def list_products(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return global products and the caller's custom products."""
    container: AppContainer = request.app.state.container
    products = container.product_service.list_products(user_id)
    return {"success": True, "products": [_serialize(item) for item in products]}


@router.post("/create", status_code=201)
async def create_product(
    body: ProductRequest, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Create a custom product; admins may create global ones."""
    container: AppContainer = request.app.state.container
    if body.is_global:
        user = container.profile_service.get_profile(user_id)
        if not user.is_admin:
            raise ForbiddenError("Only admins can create global products.")
    product = container.product_service.create_product(
        user_id, body.to_payload(), is_global=body.is_global
    )
    return {"success": True, "product": _serialize(product)}


@router.patch("/{product_id}")
async def update_product(
    product_id: UUID,
    body: ProductRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Update a product the caller owns."""
    container: AppContainer = request.app.state.container
    user = container.profile_service.get_profile(user_id)
    product = container.product_service.update_product(
        product_id, body.to_payload(), user
    )
    return {"success": True, "product": _serialize(product)}


@router.delete("/{product_id}")
async def delete_product(
    product_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Delete a product the caller owns."""
    container: AppContainer = request.app.state.container
    user = container.profile_service.get_profile(user_id)
    container.product_service.delete_product(product_id, user)
    return {"success": True, "message": "Product deleted successfully."}


def _serialize(product: Product) -> dict[str, object]:
    return {
        "_id": str(product.id),
        "name": product.name,
        "valuesPer100g": profile_to_dict(product.values),
        "unit": product.unit.value,
        "isCustom": product.is_custom,
        "createdBy": str(product.created_by) if product.created_by else None,
    }
