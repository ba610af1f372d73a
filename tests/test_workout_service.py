"""Tests for workout logging."""

from datetime import date
from uuid import uuid4

import pytest

from nutrilog.errors import InvalidInputError, NotFoundError
from nutrilog.services.workouts import WorkoutService
from tests.conftest import InMemoryWorkoutRepository

DAY = date(2024, 5, 2)


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": "Push day",
        "day": DAY,
        "duration_minutes": 45,
        "exercises": [
            {"name": "Bench press", "sets": [{"reps": 8, "weight": 60}]},
        ],
    }
    payload.update(overrides)
    return payload


def test_create_and_list_workouts() -> None:
    service = WorkoutService(InMemoryWorkoutRepository())
    user_id = uuid4()

    workout = service.create_workout(user_id, _payload())

    assert workout.name == "Push day"
    assert workout.exercises[0].sets[0].weight == 60
    assert service.list_workouts(user_id, DAY) == [workout]
    assert service.list_workouts(uuid4(), DAY) == []


def test_create_workout_validates_payload() -> None:
    service = WorkoutService(InMemoryWorkoutRepository())

    with pytest.raises(InvalidInputError):
        service.create_workout(uuid4(), _payload(name=""))
    with pytest.raises(InvalidInputError):
        service.create_workout(uuid4(), _payload(day=None))
    with pytest.raises(InvalidInputError):
        service.create_workout(uuid4(), _payload(duration_minutes=-5))
    with pytest.raises(InvalidInputError):
        service.create_workout(
            uuid4(), _payload(exercises=[{"name": "Squat", "sets": [{"reps": 0}]}])
        )


def test_update_workout_changes_present_fields() -> None:
    service = WorkoutService(InMemoryWorkoutRepository())
    user_id = uuid4()
    workout = service.create_workout(user_id, _payload())

    updated = service.update_workout(
        user_id, workout.id, {"duration_minutes": 60, "exercises": []}
    )

    assert updated.duration_minutes == 60
    assert updated.exercises == ()
    assert updated.name == "Push day"


def test_workouts_are_scoped_to_owner() -> None:
    service = WorkoutService(InMemoryWorkoutRepository())
    workout = service.create_workout(uuid4(), _payload())

    with pytest.raises(NotFoundError):
        service.update_workout(uuid4(), workout.id, {"name": "Mine now"})
    with pytest.raises(NotFoundError):
        service.delete_workout(uuid4(), workout.id)


def test_delete_and_count_workouts() -> None:
    service = WorkoutService(InMemoryWorkoutRepository())
    user_id = uuid4()
    first = service.create_workout(user_id, _payload())
    service.create_workout(user_id, _payload(day=date(2024, 5, 4)))

    assert service.count_since(user_id, date(2024, 5, 3)) == 1
    service.delete_workout(user_id, first.id)
    assert service.count_since(user_id, date(2024, 5, 1)) == 1
