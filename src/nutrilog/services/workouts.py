"""Workout logging service."""

from dataclasses import dataclass, replace
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID, uuid4

from nutrilog.domain.workouts import Exercise, ExerciseSet, Workout
from nutrilog.errors import InvalidInputError, NotFoundError


class WorkoutRepository(Protocol):
    """Persistence interface for workouts."""

    def list_by_day(self, user_id: UUID, day: date) -> list[Workout]:
        """Return a user's workouts on a day in creation order."""

    def get_workout(self, user_id: UUID, workout_id: UUID) -> Workout | None:
        """Return a workout owned by the user, if present."""

    def save_workout(self, workout: Workout) -> Workout:
        """Insert or replace a workout and return it."""

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> bool:
        """Delete a user's workout; return False when nothing was deleted."""

    def count_since(self, user_id: UUID, start: date) -> int:
        """Count a user's workouts on or after ``start``."""


@dataclass
class WorkoutService:
    """Application service for workouts."""

    repository: WorkoutRepository

    def list_workouts(self, user_id: UUID, day: date) -> list[Workout]:
        """Return workouts for a day."""
        return self.repository.list_by_day(user_id, day)

    def create_workout(self, user_id: UUID, payload: dict[str, object]) -> Workout:
        """Create a workout from a request payload."""
        name = str(payload.get("name") or "").strip()
        if not name:
            raise InvalidInputError("Workout name is required")
        day = payload.get("day")
        if not isinstance(day, date):
            raise InvalidInputError("Workout date is required")
        workout = Workout(
            id=uuid4(),
            user_id=user_id,
            day=day,
            name=name,
            duration_minutes=_duration(payload.get("duration_minutes")),
            exercises=_parse_exercises(payload.get("exercises")),
            created_at=datetime.now(tz=UTC),
        )
        return self.repository.save_workout(workout)

    def update_workout(
        self, user_id: UUID, workout_id: UUID, updates: dict[str, object]
    ) -> Workout:
        """Update fields present in ``updates`` on the user's workout."""
        workout = self.repository.get_workout(user_id, workout_id)
        if workout is None:
            raise NotFoundError("Workout not found or unauthorized")
        if updates.get("name"):
            workout = replace(workout, name=str(updates["name"]).strip())
        if updates.get("duration_minutes") is not None:
            workout = replace(
                workout, duration_minutes=_duration(updates["duration_minutes"])
            )
        if updates.get("exercises") is not None:
            workout = replace(workout, exercises=_parse_exercises(updates["exercises"]))
        if isinstance(updates.get("day"), date):
            workout = replace(workout, day=updates["day"])
        return self.repository.save_workout(workout)

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> None:
        """Delete the user's workout."""
        if not self.repository.delete_workout(user_id, workout_id):
            raise NotFoundError("Workout not found or unauthorized")

    def count_since(self, user_id: UUID, start: date) -> int:
        """Count workouts on or after a day."""
        return self.repository.count_since(user_id, start)


def _duration(value: object) -> int:
    if value is None:
        return 0
    if not isinstance(value, int | float) or value < 0:
        raise InvalidInputError("Duration must be a non-negative number")
    return int(value)


def _parse_exercises(raw: object) -> tuple[Exercise, ...]:
    if not raw:
        return ()
    if not isinstance(raw, list):
        raise InvalidInputError("Exercises must be a list")
    exercises = []
    for entry in raw:
        if isinstance(entry, Exercise):
            exercises.append(entry)
            continue
        name = str(entry.get("name") or "").strip()
        if not name:
            raise InvalidInputError("Exercise name is required")
        sets = []
        for raw_set in entry.get("sets") or []:
            reps = int(raw_set.get("reps", 0))
            weight = float(raw_set.get("weight", 0.0))
            if reps < 1 or weight < 0:
                raise InvalidInputError(
                    "Sets need at least one rep and a non-negative weight"
                )
            sets.append(ExerciseSet(reps=reps, weight=weight))
        exercises.append(Exercise(name=name, sets=tuple(sets)))
    return tuple(exercises)
