from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.farm_production import FarmProductionRepository
from src.domain.models.farm_production import FarmProduction
from src.infrastructure.db.orm.farm_production import FarmProductionORM

_TOTAL_FIELDS = (
    "cow_morning_total",
    "cow_evening_total",
    "buffalo_morning_total",
    "buffalo_evening_total",
)


class FarmProductionSQLAlchemyRepository(FarmProductionRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: FarmProductionORM) -> FarmProduction:
        return FarmProduction(
            tenant_id=orm.tenant_id,
            date=orm.date,
            cow_morning_total=Decimal(orm.cow_morning_total or 0),
            cow_evening_total=Decimal(orm.cow_evening_total or 0),
            buffalo_morning_total=Decimal(orm.buffalo_morning_total or 0),
            buffalo_evening_total=Decimal(orm.buffalo_evening_total or 0),
            updated_at=orm.updated_at,
        )

    async def _get_orm(self, tenant_id: UUID, day: date) -> FarmProductionORM | None:
        result = await self.session.execute(
            select(FarmProductionORM).where(
                FarmProductionORM.tenant_id == tenant_id, FarmProductionORM.date == day
            )
        )
        return result.scalar_one_or_none()

    async def get(self, tenant_id: UUID, day: date) -> FarmProduction | None:
        orm = await self._get_orm(tenant_id, day)
        return self._to_domain(orm) if orm else None

    async def list(
        self, tenant_id: UUID, *, date_from: date, date_to: date
    ) -> list[FarmProduction]:
        stmt = (
            select(FarmProductionORM)
            .where(
                FarmProductionORM.tenant_id == tenant_id,
                FarmProductionORM.date >= date_from,
                FarmProductionORM.date <= date_to,
            )
            .order_by(FarmProductionORM.date.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def save_total(
        self, tenant_id: UUID, day: date, field_name: str, value: Decimal
    ) -> FarmProduction:
        if field_name not in _TOTAL_FIELDS:
            raise ValueError(f"Unknown production field {field_name}")
        orm = await self._get_orm(tenant_id, day)
        if orm is None:
            orm = FarmProductionORM(
                tenant_id=tenant_id,
                date=day,
                **{name: Decimal("0") for name in _TOTAL_FIELDS},
            )
            self.session.add(orm)
        setattr(orm, field_name, value)
        await self.session.flush()
        await self.session.refresh(orm)
        return self._to_domain(orm)
