from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4

from src.application.errors import ConflictError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.farm_profile import FarmProfile
from src.domain.models.membership import Membership
from src.domain.models.user import User
from src.domain.value_objects.role import Role
from src.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class BootstrapFarmInput:
    email: str
    password: str
    farm_name: str = ""
    full_name: str | None = None
    tenant_id: UUID | None = None


@dataclass(slots=True)
class BootstrapFarmResult:
    user_id: UUID
    tenant_id: UUID
    email: str


async def execute(
    *, uow: UnitOfWork, payload: BootstrapFarmInput, password_hasher: PasswordHasher
) -> BootstrapFarmResult:
    """Create a farm with its first admin account and an empty profile."""
    if await uow.users.get_by_email(payload.email):
        raise ConflictError("Email already registered")

    tenant_id = payload.tenant_id or uuid4()
    user = User.register(
        payload.email, password_hasher.hash(payload.password), payload.full_name
    )
    created = await uow.users.add(user)
    await uow.memberships.add(
        Membership(user_id=created.id, tenant_id=tenant_id, role=Role.ADMIN)
    )
    if not await uow.farm_profiles.get(tenant_id):
        profile = FarmProfile(tenant_id=tenant_id, farm_name=payload.farm_name)
        await uow.farm_profiles.upsert(profile)

    await uow.commit()
    return BootstrapFarmResult(user_id=created.id, tenant_id=tenant_id, email=created.email)
