"""User profile endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Body, Depends, Request

from nutrilog.api.dependencies import require_user
from nutrilog.api.models import RegisterRequest  # noqa: TC001

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer
    from nutrilog.domain.profiles import UserRecord

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.post("/register", status_code=201)
async def register(body: RegisterRequest, request: Request) -> dict[str, object]:
    """Create a user with default targets."""
    container: AppContainer = request.app.state.container
    user = container.profile_service.register_user(body.email, body.full_name)
    return {"success": True, "user": _serialize(user)}


@router.get("")
async def get_profile(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's profile and targets."""
    container: AppContainer = request.app.state.container
    user = container.profile_service.get_profile(user_id)
    return {"success": True, "user": _serialize(user)}


@router.patch("")
async def update_profile(
    request: Request,
    updates: dict[str, Any] = Body(...),
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Update weight, targets or theme."""
    container: AppContainer = request.app.state.container
    user = container.profile_service.update_profile(user_id, updates)
    return {"success": True, "user": _serialize(user)}


def _serialize(user: UserRecord) -> dict[str, object]:
    return {
        "_id": str(user.id),
        "email": user.email,
        "fullName": user.full_name,
        "role": user.role,
        "profile": asdict(user.profile),
        "weightHistory": [
            {"weight": entry.weight, "date": entry.recorded_at.isoformat()}
            for entry in user.weight_history
        ],
    }
