from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.animals import (
    AnimalRepository,
    MedicalRecordsRepository,
)
from src.domain.models.animal import Animal
from src.domain.models.medical_record import MedicalRecord
from src.infrastructure.db.orm.animal import AnimalORM, MedicalRecordORM


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            tenant_id=orm.tenant_id,
            animal_code=orm.animal_code,
            animal_type=orm.animal_type,
            entry_date=orm.entry_date,
            subtype=orm.subtype,
            created_at=orm.created_at,
        )

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            id=animal.id,
            tenant_id=animal.tenant_id,
            animal_code=animal.animal_code,
            animal_type=animal.animal_type,
            subtype=animal.subtype,
            entry_date=animal.entry_date,
            created_at=animal.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(f"Animal code {animal.animal_code} already exists") from exc
        return self._to_domain(orm)

    async def list(self, tenant_id: UUID) -> list[Animal]:
        stmt = (
            select(AnimalORM)
            .where(AnimalORM.tenant_id == tenant_id)
            .order_by(AnimalORM.animal_code)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def get_by_code(self, tenant_id: UUID, animal_code: str) -> Animal | None:
        result = await self.session.execute(
            select(AnimalORM).where(
                AnimalORM.tenant_id == tenant_id, AnimalORM.animal_code == animal_code
            )
        )
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_codes(self, tenant_id: UUID) -> list[str]:
        result = await self.session.execute(
            select(AnimalORM.animal_code).where(AnimalORM.tenant_id == tenant_id)
        )
        return list(result.scalars().all())

    async def delete(self, tenant_id: UUID, animal_id: UUID) -> bool:
        result = await self.session.execute(
            delete(AnimalORM).where(AnimalORM.tenant_id == tenant_id, AnimalORM.id == animal_id)
        )
        return result.rowcount > 0


class MedicalRecordsSQLAlchemyRepository(MedicalRecordsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MedicalRecordORM) -> MedicalRecord:
        return MedicalRecord(
            id=orm.id,
            tenant_id=orm.tenant_id,
            animal_code=orm.animal_code,
            animal_type=orm.animal_type,
            diagnosis=orm.diagnosis,
            treatment=orm.treatment,
            date=orm.date,
            cost=Decimal(orm.cost or 0),
            notes=orm.notes,
            created_at=orm.created_at,
        )

    async def add(self, record: MedicalRecord) -> MedicalRecord:
        orm = MedicalRecordORM(
            id=record.id,
            tenant_id=record.tenant_id,
            animal_code=record.animal_code,
            animal_type=record.animal_type,
            diagnosis=record.diagnosis,
            treatment=record.treatment,
            date=record.date,
            cost=record.cost,
            notes=record.notes,
            created_at=record.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list(self, tenant_id: UUID, *, animal_code: str | None = None) -> list[MedicalRecord]:
        stmt = select(MedicalRecordORM).where(MedicalRecordORM.tenant_id == tenant_id)
        if animal_code is not None:
            stmt = stmt.where(MedicalRecordORM.animal_code == animal_code)
        stmt = stmt.order_by(MedicalRecordORM.date.desc(), MedicalRecordORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def delete(self, tenant_id: UUID, record_id: UUID) -> bool:
        result = await self.session.execute(
            delete(MedicalRecordORM).where(
                MedicalRecordORM.tenant_id == tenant_id, MedicalRecordORM.id == record_id
            )
        )
        return result.rowcount > 0
