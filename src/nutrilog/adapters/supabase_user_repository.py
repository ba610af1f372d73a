"""Supabase-backed user repository."""

from dataclasses import asdict, dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nutrilog.domain.profiles import UserProfile, UserRecord, WeightEntry
from nutrilog.services.profiles import UserRepository

_COLUMNS = "id, email, full_name, role, profile, weight_history"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user for an email, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, email: str, full_name: str) -> UserRecord:
        """Create a new user row with a default profile and return it."""
        response = (
            self.client.table("users")
            .insert(
                {
                    "email": email,
                    "full_name": full_name,
                    "role": "user",
                    "profile": asdict(UserProfile()),
                    "weight_history": [],
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def update_user(self, user: UserRecord) -> UserRecord:
        """Write the profile and weight history for a user."""
        response = (
            self.client.table("users")
            .update(
                {
                    "profile": asdict(user.profile),
                    "weight_history": [
                        {
                            "weight": entry.weight,
                            "recorded_at": entry.recorded_at.isoformat(),
                        }
                        for entry in user.weight_history
                    ],
                }
            )
            .eq("id", str(user.id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user in Supabase")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    raw_profile = row.get("profile") or {}
    known = UserProfile.__dataclass_fields__
    profile = UserProfile(
        **{key: value for key, value in raw_profile.items() if key in known}
    )
    history = tuple(
        WeightEntry(
            weight=float(entry["weight"]),
            recorded_at=datetime.fromisoformat(entry["recorded_at"]),
        )
        for entry in row.get("weight_history") or []
    )
    return UserRecord(
        id=UUID(row["id"]),
        email=str(row.get("email", "")),
        full_name=str(row.get("full_name", "")),
        role=str(row.get("role") or "user"),
        profile=profile,
        weight_history=history,
    )
