"""Supabase repository for workouts."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from nutrilog.domain.workouts import Exercise, ExerciseSet, Workout
from nutrilog.services.workouts import WorkoutRepository

_COLUMNS = "id, user_id, day, name, duration_minutes, exercises, created_at"


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workouts."""

    client: Client

    def list_by_day(self, user_id: UUID, day: date) -> list[Workout]:
        """Return workouts on a day ordered by creation time."""
        response = (
            self.client.table("workouts")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("day", day.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_workout(row) for row in response.data or []]

    def get_workout(self, user_id: UUID, workout_id: UUID) -> Workout | None:
        """Return a workout owned by the user."""
        response = (
            self.client.table("workouts")
            .select(_COLUMNS)
            .eq("id", str(workout_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_workout(response.data[0])

    def save_workout(self, workout: Workout) -> Workout:
        """Upsert a workout row."""
        response = (
            self.client.table("workouts")
            .upsert(
                {
                    "id": str(workout.id),
                    "user_id": str(workout.user_id),
                    "day": workout.day.isoformat(),
                    "name": workout.name,
                    "duration_minutes": workout.duration_minutes,
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
                    "created_at": workout.created_at.isoformat()
                    if workout.created_at
                    else None,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save workout")
        return _parse_workout(response.data[0])

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> bool:
        """Delete a workout owned by the user."""
        response = (
            self.client.table("workouts")
            .delete()
            .eq("id", str(workout_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)

    def count_since(self, user_id: UUID, start: date) -> int:
        """Count workouts on or after a day."""
        response = (
            self.client.table("workouts")
            .select("id")
            .eq("user_id", str(user_id))
            .gte("day", start.isoformat())
            .execute()
        )
        return len(response.data or [])


def _parse_workout(row: dict[str, object]) -> Workout:
    created_raw = row.get("created_at")
    return Workout(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        day=date.fromisoformat(str(row["day"])[:10]),
        name=str(row.get("name", "")),
        duration_minutes=int(row.get("duration_minutes") or 0),
        exercises=tuple(
            Exercise(
                name=str(exercise.get("name", "")),
                sets=tuple(
                    ExerciseSet(
                        reps=int(item.get("reps", 1)),
                        weight=float(item.get("weight", 0.0)),
                    )
                    for item in exercise.get("sets") or []
                ),
            )
            for exercise in row.get("exercises") or []
        ),
        created_at=datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None,
    )
