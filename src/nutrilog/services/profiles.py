"""User profile business logic."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from nutrilog.domain.profiles import UserProfile, UserRecord, WeightEntry
from nutrilog.errors import ConflictError, InvalidInputError, NotFoundError

_PROFILE_FIELDS = (
    "height",
    "age",
    "gender",
    "daily_calorie_target",
    "daily_protein_target",
    "daily_carb_target",
    "daily_fat_target",
    "theme",
)


class UserRepository(Protocol):
    """Persistence interface for users and profiles."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return a user by email, if present."""

    def create_user(self, email: str, full_name: str) -> UserRecord:
        """Create a user with a default profile and return it."""

    def update_user(self, user: UserRecord) -> UserRecord:
        """Persist the profile and weight history of a user."""


@dataclass
class ProfileService:
    """Application service for user profiles and targets."""

    repository: UserRepository

    def register_user(self, email: str, full_name: str) -> UserRecord:
        """Create a user with default targets."""
        cleaned = email.strip().lower()
        if not cleaned or not full_name.strip():
            raise InvalidInputError("Email and full name are required")
        if self.repository.get_by_email(cleaned):
            raise ConflictError("A user with this email already exists.")
        return self.repository.create_user(cleaned, full_name.strip())

    def get_profile(self, user_id: UUID) -> UserRecord:
        """Return the user with their profile."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def update_profile(self, user_id: UUID, updates: dict[str, object]) -> UserRecord:
        """Apply profile changes, recording weight changes in the history.

        The payload may be flat or nested under ``profile``.
        """
        user = self.get_profile(user_id)
        nested = updates.get("profile")
        data = nested if isinstance(nested, dict) else updates
        profile = user.profile
        history = user.weight_history

        if data.get("weight") is not None:
            weight = _to_number(data["weight"], "weight")
            if weight != profile.weight:
                history = (
                    *history,
                    WeightEntry(weight=weight, recorded_at=datetime.now(tz=UTC)),
                )
                profile = replace(profile, weight=weight)

        changes = {
            key: data[key] for key in _PROFILE_FIELDS if data.get(key) is not None
        }
        if updates.get("theme"):
            changes["theme"] = updates["theme"]
        profile = _apply_changes(profile, changes)
        return self.repository.update_user(
            replace(user, profile=profile, weight_history=history)
        )


def _apply_changes(profile: UserProfile, changes: dict[str, object]) -> UserProfile:
    typed: dict[str, object] = {}
    for key, value in changes.items():
        if key in {"gender", "theme"}:
            typed[key] = str(value)
        elif key == "age":
            typed[key] = int(_to_number(value, key))
        else:
            typed[key] = _to_number(value, key)
    return replace(profile, **typed)


def _to_number(value: object, field_name: str) -> float:
    if isinstance(value, bool):
        raise InvalidInputError(f"{field_name} must be a number")
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError as exc:
            raise InvalidInputError(f"{field_name} must be a number") from exc
    raise InvalidInputError(f"{field_name} must be a number")
