from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    topic: str = Field(min_length=1)
    date: DtDate
    description: str = ""
    remarks: str = ""


class NoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    topic: str
    date: DtDate
    description: str
    remarks: str
    created_at: datetime


class ConsumptionCreate(BaseModel):
    name: str = Field(min_length=1)
    qty: Decimal = Field(gt=0)
    unit: str = Field(min_length=1)
    date: DtDate
    notes: str | None = None


class ConsumptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    qty: Decimal
    unit: str
    date: DtDate
    notes: str | None
    created_at: datetime
