from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.cash_entry import CashEntry
from src.domain.models.expense import Expense


class CashEntriesRepository(Protocol):
    async def add(self, entry: CashEntry) -> CashEntry: ...
    async def list(
        self, tenant_id: UUID, *, date_from: date | None, date_to: date | None
    ) -> list[CashEntry]: ...
    async def delete(self, tenant_id: UUID, entry_id: UUID) -> bool: ...


class ExpensesRepository(Protocol):
    async def add(self, expense: Expense) -> Expense: ...
    async def list(
        self, tenant_id: UUID, *, date_from: date | None, date_to: date | None
    ) -> list[Expense]: ...
    async def delete(self, tenant_id: UUID, expense_id: UUID) -> bool: ...
