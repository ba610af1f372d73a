"""Statistics over stored daily logs."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from nutrilog.domain.diary import DailyLog
from nutrilog.domain.nutrition import ZERO_PROFILE, MacroProfile
from nutrilog.domain.profiles import UserProfile
from nutrilog.domain.stats import DailyTotals, PeriodSummary, TargetProgress
from nutrilog.services.diary import DailyLogRepository
from nutrilog.services.nutrition import round_profile
from nutrilog.services.profiles import ProfileService

DECEMBER = 12


@dataclass
class StatsService:
    """Service for weekly and monthly summaries against targets."""

    repository: DailyLogRepository
    profile_service: ProfileService

    def get_week(self, user_id: UUID, day: date) -> PeriodSummary:
        """Return totals for the Monday-to-Sunday week containing ``day``."""
        start = day - timedelta(days=day.weekday())
        return self._summarize(user_id, start, 7)

    def get_month(self, user_id: UUID, day: date) -> PeriodSummary:
        """Return totals for the calendar month containing ``day``."""
        start = day.replace(day=1)
        if start.month == DECEMBER:
            end = start.replace(year=start.year + 1, month=1)
        else:
            end = start.replace(month=start.month + 1)
        return self._summarize(user_id, start, (end - start).days)

    def _summarize(self, user_id: UUID, start: date, days: int) -> PeriodSummary:
        logs = self.repository.list_between(
            user_id, start, start + timedelta(days=days)
        )
        profile = self.profile_service.get_profile(user_id).profile
        daily = _aggregate_days(start, days, logs)
        average = _average(daily)
        return PeriodSummary(
            start=start,
            daily=daily,
            average=average,
            progress=_progress(average, profile),
        )


def _aggregate_days(start: date, days: int, logs: list[DailyLog]) -> list[DailyTotals]:
    by_day = {log.day: log.totals for log in logs}
    daily = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        daily.append(DailyTotals(day=day, totals=by_day.get(day, ZERO_PROFILE)))
    return daily


def _average(daily: list[DailyTotals]) -> MacroProfile:
    total = ZERO_PROFILE
    for entry in daily:
        total = total + entry.totals
    count = max(len(daily), 1)
    return round_profile(
        MacroProfile(
            calories=total.calories / count,
            protein=total.protein / count,
            carbs=total.carbs / count,
            fat=total.fat / count,
        )
    )


def _progress(average: MacroProfile, profile: UserProfile) -> dict[str, TargetProgress]:
    pairs = {
        "calories": (profile.daily_calorie_target, average.calories),
        "protein": (profile.daily_protein_target, average.protein),
        "carbs": (profile.daily_carb_target, average.carbs),
        "fat": (profile.daily_fat_target, average.fat),
    }
    progress = {}
    for name, (target, value) in pairs.items():
        percent = round(value / target * 100, 1) if target > 0 else 0.0
        progress[name] = TargetProgress(target=target, average=value, percent=percent)
    return progress
