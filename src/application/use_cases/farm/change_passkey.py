from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.farm_profile import FarmProfile
from src.domain.value_objects.role import Role
from src.infrastructure.auth.passkey import PasskeyVerifier

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    new_passkey: str,
    verifier: PasskeyVerifier,
) -> None:
    """Store a new farm passkey. The caller has already confirmed the current one."""
    if not role.can_delete():
        raise PermissionDenied("Only admins can change the passkey")
    passkey_hash = verifier.hash(new_passkey)
    profile = await uow.farm_profiles.get(tenant_id) or FarmProfile(tenant_id=tenant_id)
    profile.passkey_hash = passkey_hash
    await uow.farm_profiles.upsert(profile)
    await uow.commit()
    logger.info("Passkey changed for tenant %s", tenant_id)
