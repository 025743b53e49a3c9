from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.shift_records import ShiftRecordsRepository
from src.domain.models.daily_shift_record import DailyShiftRecord
from src.domain.value_objects.milk import SHIFT_FIELDS
from src.infrastructure.db.orm.shift_record import ShiftRecordORM


class ShiftRecordsSQLAlchemyRepository(ShiftRecordsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ShiftRecordORM) -> DailyShiftRecord:
        return DailyShiftRecord(
            tenant_id=orm.tenant_id,
            date=orm.date,
            cow_morning=dict(orm.cow_morning or {}),
            cow_evening=dict(orm.cow_evening or {}),
            buffalo_morning=dict(orm.buffalo_morning or {}),
            buffalo_evening=dict(orm.buffalo_evening or {}),
            updated_at=orm.updated_at,
        )

    async def _get_orm(self, tenant_id: UUID, day: date) -> ShiftRecordORM | None:
        result = await self.session.execute(
            select(ShiftRecordORM).where(
                ShiftRecordORM.tenant_id == tenant_id, ShiftRecordORM.date == day
            )
        )
        return result.scalar_one_or_none()

    async def get(self, tenant_id: UUID, day: date) -> DailyShiftRecord | None:
        orm = await self._get_orm(tenant_id, day)
        return self._to_domain(orm) if orm else None

    async def list(
        self, tenant_id: UUID, *, date_from: date | None, date_to: date | None
    ) -> list[DailyShiftRecord]:
        conds = [ShiftRecordORM.tenant_id == tenant_id]
        if date_from:
            conds.append(ShiftRecordORM.date >= date_from)
        if date_to:
            conds.append(ShiftRecordORM.date <= date_to)
        result = await self.session.execute(
            select(ShiftRecordORM).where(and_(*conds)).order_by(ShiftRecordORM.date)
        )
        return [self._to_domain(r) for r in result.scalars().all()]

    async def save_shift(
        self, tenant_id: UUID, day: date, field_name: str, quantities: dict[str, str]
    ) -> DailyShiftRecord:
        if field_name not in SHIFT_FIELDS:
            raise ValueError(f"Unknown shift field {field_name}")
        orm = await self._get_orm(tenant_id, day)
        if orm is None:
            orm = ShiftRecordORM(
                tenant_id=tenant_id,
                date=day,
                cow_morning={},
                cow_evening={},
                buffalo_morning={},
                buffalo_evening={},
            )
            self.session.add(orm)
        # Assign a new dict so the JSON column is flagged dirty
        setattr(orm, field_name, dict(quantities))
        await self.session.flush()
        await self.session.refresh(orm)
        return self._to_domain(orm)
