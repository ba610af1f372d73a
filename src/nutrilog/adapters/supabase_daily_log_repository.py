"""Supabase repository for daily logs."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from nutrilog.domain.diary import DailyLog
from nutrilog.domain.documents import log_from_row, meals_to_dict, profile_to_dict
from nutrilog.services.diary import DailyLogRepository

_COLUMNS = "id, user_id, day, meals, totals"


@dataclass
class SupabaseDailyLogRepository(DailyLogRepository):
    """Supabase implementation storing each daily log as one row.

    Meals and totals live in JSON columns so a save is a single-row upsert.
    The table has a unique constraint on ``(user_id, day)``.
    """

    client: Client

    def find_by_user_and_day(self, user_id: UUID, day: date) -> DailyLog | None:
        """Return the log for a user and day, if present."""
        response = (
            self.client.table("daily_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("day", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return log_from_row(response.data[0])

    def save(self, log: DailyLog) -> DailyLog:
        """Upsert the whole log keyed by user and day."""
        response = (
            self.client.table("daily_logs")
            .upsert(
                {
                    "user_id": str(log.user_id),
                    "day": log.day.isoformat(),
                    "meals": meals_to_dict(log.meals),
                    "totals": profile_to_dict(log.totals),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id,day",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save daily log")
        return log_from_row(response.data[0])

    def list_between(self, user_id: UUID, start: date, end: date) -> list[DailyLog]:
        """Return logs for days in the half-open range."""
        response = (
            self.client.table("daily_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("day", start.isoformat())
            .lt("day", end.isoformat())
            .order("day", desc=False)
            .execute()
        )
        return [log_from_row(row) for row in response.data or []]
