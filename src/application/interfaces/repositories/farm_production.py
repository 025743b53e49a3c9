from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from src.domain.models.farm_production import FarmProduction


class FarmProductionRepository(Protocol):
    async def get(self, tenant_id: UUID, day: date) -> FarmProduction | None: ...
    async def list(
        self, tenant_id: UUID, *, date_from: date, date_to: date
    ) -> list[FarmProduction]: ...
    async def save_total(
        self, tenant_id: UUID, day: date, field_name: str, value: Decimal
    ) -> FarmProduction: ...
