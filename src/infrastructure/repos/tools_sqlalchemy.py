from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.tools import ConsumptionRepository, NotesRepository
from src.domain.models.consumption import ConsumptionItem
from src.domain.models.note import Note
from src.infrastructure.db.orm.tools import ConsumptionItemORM, NoteORM


class NotesSQLAlchemyRepository(NotesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: NoteORM) -> Note:
        return Note(
            id=orm.id,
            tenant_id=orm.tenant_id,
            topic=orm.topic,
            date=orm.date,
            description=orm.description,
            remarks=orm.remarks,
            created_at=orm.created_at,
        )

    async def add(self, note: Note) -> Note:
        orm = NoteORM(
            id=note.id,
            tenant_id=note.tenant_id,
            topic=note.topic,
            date=note.date,
            description=note.description,
            remarks=note.remarks,
            created_at=note.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list(self, tenant_id: UUID) -> list[Note]:
        stmt = (
            select(NoteORM)
            .where(NoteORM.tenant_id == tenant_id)
            .order_by(NoteORM.date.desc(), NoteORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def delete(self, tenant_id: UUID, note_id: UUID) -> bool:
        result = await self.session.execute(
            delete(NoteORM).where(NoteORM.tenant_id == tenant_id, NoteORM.id == note_id)
        )
        return result.rowcount > 0


class ConsumptionSQLAlchemyRepository(ConsumptionRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ConsumptionItemORM) -> ConsumptionItem:
        return ConsumptionItem(
            id=orm.id,
            tenant_id=orm.tenant_id,
            name=orm.name,
            qty=Decimal(orm.qty),
            unit=orm.unit,
            date=orm.date,
            notes=orm.notes,
            created_at=orm.created_at,
        )

    async def add(self, item: ConsumptionItem) -> ConsumptionItem:
        orm = ConsumptionItemORM(
            id=item.id,
            tenant_id=item.tenant_id,
            name=item.name,
            qty=item.qty,
            unit=item.unit,
            date=item.date,
            notes=item.notes,
            created_at=item.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list(self, tenant_id: UUID) -> list[ConsumptionItem]:
        stmt = (
            select(ConsumptionItemORM)
            .where(ConsumptionItemORM.tenant_id == tenant_id)
            .order_by(ConsumptionItemORM.date.desc(), ConsumptionItemORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def delete(self, tenant_id: UUID, item_id: UUID) -> bool:
        result = await self.session.execute(
            delete(ConsumptionItemORM).where(
                ConsumptionItemORM.tenant_id == tenant_id, ConsumptionItemORM.id == item_id
            )
        )
        return result.rowcount > 0
