"""Workout endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from nutrilog.api.dependencies import parse_day, require_user
from nutrilog.api.models import WorkoutRequest  # noqa: TC001

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer
    from nutrilog.domain.workouts import Workout

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


@router.get("")
async def list_workouts(
    request: Request, date: str | None = None, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return workouts for a date."""
    container: AppContainer = request.app.state.container
    workouts = container.workout_service.list_workouts(user_id, parse_day(date))
    return {"success": True, "workouts": [_serialize(item) for item in workouts]}


@router.post("/add", status_code=201)
async def add_workout(
    body: WorkoutRequest, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Create a workout."""
    container: AppContainer = request.app.state.container
    payload = _to_payload(body)
    payload["day"] = parse_day(body.day)
    workout = container.workout_service.create_workout(user_id, payload)
    return {"success": True, "workout": _serialize(workout)}


@router.patch("/{workout_id}")
async def update_workout(
    workout_id: UUID,
    body: WorkoutRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Update a workout the caller owns."""
    container: AppContainer = request.app.state.container
    payload = _to_payload(body)
    if body.day:
        payload["day"] = parse_day(body.day)
    workout = container.workout_service.update_workout(user_id, workout_id, payload)
    return {"success": True, "workout": _serialize(workout)}


@router.delete("/{workout_id}")
async def delete_workout(
    workout_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Delete a workout the caller owns."""
    container: AppContainer = request.app.state.container
    container.workout_service.delete_workout(user_id, workout_id)
    return {"success": True, "message": "Workout deleted"}


def _to_payload(body: WorkoutRequest) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": body.name,
        "duration_minutes": body.duration_minutes,
    }
    if body.exercises is not None:
        payload["exercises"] = [exercise.model_dump() for exercise in body.exercises]
    return payload


def _serialize(workout: Workout) -> dict[str, object]:
    return {
        "_id": str(workout.id),
        "userId": str(workout.user_id),
        "date": workout.day.isoformat(),
        "name": workout.name,
        "duration": workout.duration_minutes,
        "exercises": [
            {
                "name": exercise.name,
                "sets": [
                    {"reps": item.reps, "weight": item.weight}
                    for item in exercise.sets
                ],
            }
            for exercise in workout.exercises
        ],
    }
