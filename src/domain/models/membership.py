from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects.role import Role


@dataclass(slots=True, frozen=True)
class Membership:
    """Grants a user a role on one farm (tenant)."""

    user_id: UUID
    tenant_id: UUID
    role: Role
