from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class User:
    """A login. Farm access comes from memberships, not from the user row."""

    id: UUID
    email: str
    hashed_password: str
    full_name: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @classmethod
    def register(cls, email: str, hashed_password: str, full_name: str | None = None) -> User:
        return cls(
            id=uuid4(),
            email=normalize_email(email),
            hashed_password=hashed_password,
            full_name=(full_name or "").strip() or None,
        )
