"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date

from nutrilog.domain.nutrition import MacroProfile


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros."""

    day: date
    totals: MacroProfile


@dataclass(frozen=True)
class TargetProgress:
    """Average intake against a daily target."""

    target: float
    average: float
    percent: float


@dataclass(frozen=True)
class PeriodSummary:
    """Totals for each day of a period with averages and target progress."""

    start: date
    daily: list[DailyTotals]
    average: MacroProfile
    progress: dict[str, TargetProgress]
