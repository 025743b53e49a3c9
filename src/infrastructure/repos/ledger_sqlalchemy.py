from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.ledger import (
    CashEntriesRepository,
    ExpensesRepository,
)
from src.domain.models.cash_entry import CashEntry
from src.domain.models.expense import Expense
from src.infrastructure.db.orm.ledger import CashEntryORM, ExpenseORM


class CashEntriesSQLAlchemyRepository(CashEntriesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: CashEntryORM) -> CashEntry:
        return CashEntry(
            id=orm.id,
            tenant_id=orm.tenant_id,
            date=orm.date,
            description=orm.description,
            amount=Decimal(orm.amount),
            entry_type=orm.entry_type,
            created_at=orm.created_at,
        )

    async def add(self, entry: CashEntry) -> CashEntry:
        orm = CashEntryORM(
            id=entry.id,
            tenant_id=entry.tenant_id,
            date=entry.date,
            description=entry.description,
            amount=entry.amount,
            entry_type=entry.entry_type,
            created_at=entry.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list(
        self, tenant_id: UUID, *, date_from: date | None, date_to: date | None
    ) -> list[CashEntry]:
        conds = [CashEntryORM.tenant_id == tenant_id]
        if date_from:
            conds.append(CashEntryORM.date >= date_from)
        if date_to:
            conds.append(CashEntryORM.date <= date_to)
        stmt = (
            select(CashEntryORM)
            .where(and_(*conds))
            .order_by(CashEntryORM.date.desc(), CashEntryORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def delete(self, tenant_id: UUID, entry_id: UUID) -> bool:
        result = await self.session.execute(
            delete(CashEntryORM).where(
                CashEntryORM.tenant_id == tenant_id, CashEntryORM.id == entry_id
            )
        )
        return result.rowcount > 0


class ExpensesSQLAlchemyRepository(ExpensesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ExpenseORM) -> Expense:
        return Expense(
            id=orm.id,
            tenant_id=orm.tenant_id,
            date=orm.date,
            item=orm.item,
            amount=Decimal(orm.amount),
            category=orm.category,
            notes=orm.notes,
            created_at=orm.created_at,
        )

    async def add(self, expense: Expense) -> Expense:
        orm = ExpenseORM(
            id=expense.id,
            tenant_id=expense.tenant_id,
            date=expense.date,
            item=expense.item,
            amount=expense.amount,
            category=expense.category,
            notes=expense.notes,
            created_at=expense.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list(
        self, tenant_id: UUID, *, date_from: date | None, date_to: date | None
    ) -> list[Expense]:
        conds = [ExpenseORM.tenant_id == tenant_id]
        if date_from:
            conds.append(ExpenseORM.date >= date_from)
        if date_to:
            conds.append(ExpenseORM.date <= date_to)
        stmt = (
            select(ExpenseORM)
            .where(and_(*conds))
            .order_by(ExpenseORM.date.desc(), ExpenseORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def delete(self, tenant_id: UUID, expense_id: UUID) -> bool:
        result = await self.session.execute(
            delete(ExpenseORM).where(
                ExpenseORM.tenant_id == tenant_id, ExpenseORM.id == expense_id
            )
        )
        return result.rowcount > 0
