"""Domain models for users and their profiles."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserProfile:
    """Body measurements, daily targets and UI preference."""

    weight: float = 0.0
    height: float = 0.0
    age: int = 0
    gender: str | None = None
    daily_calorie_target: float = 2000
    daily_protein_target: float = 150
    daily_carb_target: float = 300
    daily_fat_target: float = 70
    theme: str = "business"


@dataclass(frozen=True)
class WeightEntry:
    """A recorded body weight."""

    weight: float
    recorded_at: datetime


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    email: str
    full_name: str
    role: str = "user"
    profile: UserProfile = UserProfile()
    weight_history: tuple[WeightEntry, ...] = ()

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
