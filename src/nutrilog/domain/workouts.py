"""Domain models for workouts."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class ExerciseSet:
    """A single set; weight 0 means bodyweight."""

    reps: int
    weight: float = 0.0


@dataclass(frozen=True)
class Exercise:
    """An exercise performed as a list of sets."""

    name: str
    sets: tuple[ExerciseSet, ...] = ()


@dataclass(frozen=True)
class Workout:
    """A training session on a given day."""

    id: UUID
    user_id: UUID
    day: date
    name: str
    duration_minutes: int = 0
    exercises: tuple[Exercise, ...] = ()
    created_at: datetime | None = None
