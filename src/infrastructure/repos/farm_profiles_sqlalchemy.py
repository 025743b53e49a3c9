from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.farm_profiles import FarmProfilesRepository
from src.domain.models.farm_profile import FarmProfile
from src.infrastructure.db.orm.farm_profile import FarmProfileORM

_FIELDS = ("farm_name", "city", "country", "contact", "email", "passkey_hash")


class FarmProfilesSQLAlchemyRepository(FarmProfilesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: FarmProfileORM) -> FarmProfile:
        return FarmProfile(
            tenant_id=orm.tenant_id,
            farm_name=orm.farm_name,
            city=orm.city,
            country=orm.country,
            contact=orm.contact,
            email=orm.email,
            passkey_hash=orm.passkey_hash,
            updated_at=orm.updated_at,
        )

    async def get(self, tenant_id: UUID) -> FarmProfile | None:
        result = await self.session.execute(
            select(FarmProfileORM).where(FarmProfileORM.tenant_id == tenant_id)
        )
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def upsert(self, profile: FarmProfile) -> FarmProfile:
        result = await self.session.execute(
            select(FarmProfileORM).where(FarmProfileORM.tenant_id == profile.tenant_id)
        )
        orm = result.scalar_one_or_none()
        if orm is None:
            orm = FarmProfileORM(tenant_id=profile.tenant_id)
            self.session.add(orm)
        for name in _FIELDS:
            setattr(orm, name, getattr(profile, name))
        await self.session.flush()
        await self.session.refresh(orm)
        return self._to_domain(orm)
