from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from src.application.errors import AuthError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.membership import Membership
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class MembershipInfo:
    tenant_id: UUID
    role: Role


@dataclass(slots=True)
class MeResult:
    user_id: UUID
    email: str
    full_name: str | None
    active_tenant: UUID
    active_role: Role
    farm_name: str | None
    memberships: list[MembershipInfo]
    claims: dict[str, Any]


async def execute(
    uow: UnitOfWork,
    *,
    user_id: UUID,
    active_tenant: UUID,
    active_role: Role,
    memberships: list[Membership],
    claims: dict[str, Any],
) -> MeResult:
    user = await uow.users.get(user_id)
    if not user:
        raise AuthError("User not found")
    profile = await uow.farm_profiles.get(active_tenant)
    return MeResult(
        user_id=user.id,
        email=user.email,
        full_name=user.full_name,
        active_tenant=active_tenant,
        active_role=active_role,
        farm_name=profile.farm_name if profile and profile.has_details else None,
        memberships=[MembershipInfo(tenant_id=m.tenant_id, role=m.role) for m in memberships],
        claims=claims,
    )
