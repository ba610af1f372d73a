"""Dashboard aggregation for the home screen."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from uuid import UUID

from nutrilog.domain.dashboard import Dashboard, WeightTrend, WorkoutSummary
from nutrilog.domain.profiles import UserRecord
from nutrilog.services.diary import DiaryService
from nutrilog.services.profiles import ProfileService
from nutrilog.services.workouts import WorkoutService

WEEKLY_WORKOUT_TARGET = 3
_SUNDAY = 6


@dataclass
class DashboardService:
    """Combines the daily log, profile and workouts for one day."""

    diary_service: DiaryService
    profile_service: ProfileService
    workout_service: WorkoutService

    def get_dashboard(self, user_id: UUID, day: date) -> Dashboard:
        """Return the dashboard for ``day``."""
        user = self.profile_service.get_profile(user_id)
        log = self.diary_service.get_daily_log(user_id, day)
        return Dashboard(
            profile_name=user.full_name,
            calorie_target=user.profile.daily_calorie_target,
            calories_consumed=log.totals.calories,
            daily_log=log,
            weight=weight_trend(user, datetime.now(tz=UTC)),
            workouts=self._workout_summary(user_id, day),
        )

    def _workout_summary(self, user_id: UUID, day: date) -> WorkoutSummary:
        # Weeks start on Sunday here, unlike the Monday weeks of StatsService.
        days_since_sunday = (day.weekday() - _SUNDAY) % 7
        week_start = day - timedelta(days=days_since_sunday)
        done_today = bool(self.workout_service.list_workouts(user_id, day))
        return WorkoutSummary(
            workouts_completed=self.workout_service.count_since(user_id, week_start),
            target=WEEKLY_WORKOUT_TARGET,
            next_workout="Done today!" if done_today else "Plan for tomorrow",
        )


def weight_trend(user: UserRecord, now: datetime) -> WeightTrend:
    """Compare the latest weight with the latest entry at least a week old."""
    if not user.weight_history:
        return WeightTrend(current=user.profile.weight, change=0.0, trend="neutral")
    history = sorted(
        user.weight_history, key=lambda entry: entry.recorded_at, reverse=True
    )
    current = history[0].weight
    week_ago = now - timedelta(days=7)
    previous = next(
        (entry for entry in history if entry.recorded_at <= week_ago), None
    )
    if previous is None:
        return WeightTrend(current=current, change=0.0, trend="neutral")
    change = round(current - previous.weight, 1)
    if change > 0:
        trend = "up"
    elif change < 0:
        trend = "down"
    else:
        trend = "neutral"
    return WeightTrend(current=current, change=change, trend=trend)
