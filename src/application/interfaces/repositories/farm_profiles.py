from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.farm_profile import FarmProfile


class FarmProfilesRepository(Protocol):
    async def get(self, tenant_id: UUID) -> FarmProfile | None: ...
    async def upsert(self, profile: FarmProfile) -> FarmProfile: ...
