from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.cash_entry import CashEntryType
from src.domain.models.expense import ExpenseCategory


class CashEntryCreate(BaseModel):
    date: DtDate
    description: str = Field(min_length=1)
    amount: Decimal = Field(gt=0)
    entry_type: CashEntryType


class CashEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    date: DtDate
    description: str
    amount: Decimal
    entry_type: CashEntryType
    created_at: datetime


class ExpenseCreate(BaseModel):
    date: DtDate
    item: str = Field(min_length=1)
    amount: Decimal = Field(gt=0)
    category: ExpenseCategory = ExpenseCategory.FEED
    notes: str | None = None


class ExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    date: DtDate
    item: str
    amount: Decimal
    category: ExpenseCategory
    notes: str | None
    created_at: datetime
