"""Dashboard and summary endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from nutrilog.api.dependencies import parse_day, require_user
from nutrilog.domain.documents import log_to_dict, profile_to_dict

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer
    from nutrilog.domain.dashboard import Dashboard
    from nutrilog.domain.stats import PeriodSummary

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard")
async def get_dashboard(
    request: Request, date: str | None = None, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return the home screen data for a date."""
    container: AppContainer = request.app.state.container
    dashboard = container.dashboard_service.get_dashboard(user_id, parse_day(date))
    return {"success": True, "data": _serialize_dashboard(dashboard)}


@router.get("/stats/week")
async def get_week(
    request: Request, date: str | None = None, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return the week containing a date with averages against targets."""
    container: AppContainer = request.app.state.container
    summary = container.stats_service.get_week(user_id, parse_day(date))
    return {"success": True, "summary": _serialize_period(summary)}


@router.get("/stats/month")
async def get_month(
    request: Request, date: str | None = None, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return the month containing a date with averages against targets."""
    container: AppContainer = request.app.state.container
    summary = container.stats_service.get_month(user_id, parse_day(date))
    return {"success": True, "summary": _serialize_period(summary)}


def _serialize_dashboard(dashboard: Dashboard) -> dict[str, object]:
    log = log_to_dict(dashboard.daily_log)
    return {
        "headerData": {
            "calorieTarget": dashboard.calorie_target,
            "caloriesConsumed": dashboard.calories_consumed,
            "profileName": dashboard.profile_name,
        },
        "weightData": {
            "current": dashboard.weight.current,
            "change": dashboard.weight.change,
            "trend": dashboard.weight.trend,
        },
        "dailySummary": {"totals": log["totals"], "logDetails": log["meals"]},
        "workoutSummary": {
            "workoutsCompleted": dashboard.workouts.workouts_completed,
            "target": dashboard.workouts.target,
            "nextWorkout": dashboard.workouts.next_workout,
        },
    }


def _serialize_period(summary: PeriodSummary) -> dict[str, object]:
    return {
        "start": summary.start.isoformat(),
        "daily": [
            {"date": entry.day.isoformat(), "totals": profile_to_dict(entry.totals)}
            for entry in summary.daily
        ],
        "average": profile_to_dict(summary.average),
        "progress": {
            name: {
                "target": item.target,
                "average": item.average,
                "percent": item.percent,
            }
            for name, item in summary.progress.items()
        },
    }
