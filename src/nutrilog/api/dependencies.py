"""Shared FastAPI dependencies."""

from datetime import UTC, date, datetime
from uuid import UUID

from fastapi import Header, HTTPException, status

from nutrilog.domain.diary import log_day
from nutrilog.errors import InvalidInputError


async def require_user(x_user_id: str | None = Header(default=None)) -> UUID:
    """Return the caller's user id from the identity header."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        return UUID(x_user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from exc


def parse_day(raw: str | None) -> date:
    """Parse an ISO date or timestamp into a log day; default to today (UTC)."""
    if not raw:
        return datetime.now(tz=UTC).date()
    try:
        if len(raw) == len("YYYY-MM-DD"):
            return date.fromisoformat(raw)
        return log_day(datetime.fromisoformat(raw))
    except ValueError as exc:
        raise InvalidInputError(f"Invalid date: {raw}") from exc
