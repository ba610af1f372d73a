"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrilog.adapters.supabase_daily_log_repository import (
    SupabaseDailyLogRepository,
)
from nutrilog.adapters.supabase_product_repository import SupabaseProductRepository
from nutrilog.adapters.supabase_user_repository import SupabaseUserRepository
from nutrilog.adapters.supabase_workout_repository import SupabaseWorkoutRepository
from nutrilog.config import Settings
from nutrilog.services.dashboard import DashboardService
from nutrilog.services.diary import DiaryService
from nutrilog.services.products import ProductService
from nutrilog.services.profiles import ProfileService
from nutrilog.services.stats import StatsService
from nutrilog.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    product_service: ProductService
    profile_service: ProfileService
    diary_service: DiaryService
    workout_service: WorkoutService
    stats_service: StatsService
    dashboard_service: DashboardService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    daily_log_repository = SupabaseDailyLogRepository(supabase_client)
    product_service = ProductService(SupabaseProductRepository(supabase_client))
    profile_service = ProfileService(SupabaseUserRepository(supabase_client))
    workout_service = WorkoutService(SupabaseWorkoutRepository(supabase_client))
    diary_service = DiaryService(
        repository=daily_log_repository,
        products=product_service,
    )
    stats_service = StatsService(
        repository=daily_log_repository,
        profile_service=profile_service,
    )
    dashboard_service = DashboardService(
        diary_service=diary_service,
        profile_service=profile_service,
        workout_service=workout_service,
    )

    return AppContainer(
        settings=resolved_settings,
        product_service=product_service,
        profile_service=profile_service,
        diary_service=diary_service,
        workout_service=workout_service,
        stats_service=stats_service,
        dashboard_service=dashboard_service,
    )
