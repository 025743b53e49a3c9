from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.farm_profile import FarmProfile
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class UpdateProfileInput:
    farm_name: str | None = None
    city: str | None = None
    country: str | None = None
    contact: str | None = None
    email: str | None = None


async def execute(
    uow: UnitOfWork, tenant_id: UUID, role: Role, payload: UpdateProfileInput
) -> FarmProfile:
    if not role.can_update():
        raise PermissionDenied("Role not allowed to edit the farm profile")
    profile = await uow.farm_profiles.get(tenant_id) or FarmProfile(tenant_id=tenant_id)
    for field_name in ("farm_name", "city", "country", "contact", "email"):
        value = getattr(payload, field_name)
        if value is not None:
            setattr(profile, field_name, value.strip())
    saved = await uow.farm_profiles.upsert(profile)
    await uow.commit()
    return saved
