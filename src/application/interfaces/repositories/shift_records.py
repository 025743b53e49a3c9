from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.daily_shift_record import DailyShiftRecord


class ShiftRecordsRepository(Protocol):
    async def get(self, tenant_id: UUID, day: date) -> DailyShiftRecord | None: ...
    async def list(
        self, tenant_id: UUID, *, date_from: date | None, date_to: date | None
    ) -> list[DailyShiftRecord]: ...
    async def save_shift(
        self, tenant_id: UUID, day: date, field_name: str, quantities: dict[str, str]
    ) -> DailyShiftRecord: ...
