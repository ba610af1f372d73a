"""Domain models for the dashboard view."""

from dataclasses import dataclass

from nutrilog.domain.diary import DailyLog


@dataclass(frozen=True)
class WeightTrend:
    """Current weight and its change over the last week."""

    current: float
    change: float
    trend: str


@dataclass(frozen=True)
class WorkoutSummary:
    """Workouts completed this week against the weekly target."""

    workouts_completed: int
    target: int
    next_workout: str


@dataclass(frozen=True)
class Dashboard:
    """Everything the home screen needs for one day."""

    profile_name: str
    calorie_target: float
    calories_consumed: float
    daily_log: DailyLog
    weight: WeightTrend
    workouts: WorkoutSummary
