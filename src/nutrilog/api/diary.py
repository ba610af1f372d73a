"""Diary endpoints for logging food."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from nutrilog.api.dependencies import parse_day, require_user
from nutrilog.api.models import (  # noqa: TC001
    AddCompositeRequest,
    AddItemRequest,
    RemoveItemRequest,
    UpdateItemRequest,
)
from nutrilog.domain.documents import log_to_dict

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer

router = APIRouter(prefix="/api/diary", tags=["diary"])


@router.get("")
async def get_log(
    request: Request,
    date: str | None = None,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Return the daily log for a date."""
    container: AppContainer = request.app.state.container
    log = container.diary_service.get_daily_log(user_id, parse_day(date))
    return {"success": True, "log": log_to_dict(log)}


@router.post("/add-item")
async def add_item(
    body: AddItemRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Log an amount of a product."""
    container: AppContainer = request.app.state.container
    log = container.diary_service.add_food_item(
        user_id, parse_day(body.day), body.meal_type, body.product_id, body.amount
    )
    return {"success": True, "log": log_to_dict(log)}


@router.post("/add-composite")
async def add_composite(
    body: AddCompositeRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Log a dish made of several products."""
    container: AppContainer = request.app.state.container
    log = container.diary_service.add_composite_food(
        user_id,
        parse_day(body.day),
        body.meal_type,
        body.name,
        [ingredient.to_request() for ingredient in body.ingredients],
    )
    return {"success": True, "log": log_to_dict(log)}


@router.patch("/item/{item_id}")
async def update_item(
    item_id: UUID,
    body: UpdateItemRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Change an item's amount or ingredients."""
    container: AppContainer = request.app.state.container
    log = container.diary_service.update_food_item(
        user_id, parse_day(body.day), body.meal_type, item_id, body.to_update()
    )
    return {"success": True, "log": log_to_dict(log)}


@router.delete("/item/{item_id}")
async def delete_item(
    item_id: UUID,
    body: RemoveItemRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Remove an item from a meal; unknown ids are ignored."""
    container: AppContainer = request.app.state.container
    log = container.diary_service.remove_food_item(
        user_id, parse_day(body.day), body.meal_type, item_id
    )
    return {"success": True, "log": log_to_dict(log)}
