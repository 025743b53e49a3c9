from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CustomerCreate(BaseModel):
    customer_code: str = Field(min_length=1, max_length=32)
    name: str = Field(min_length=1)
    phone: str | None = None
    cow_rate: Decimal | None = Field(default=None, ge=0)
    buffalo_rate: Decimal | None = Field(default=None, ge=0)


class CustomerUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    phone: str | None = None
    cow_rate: Decimal | None = Field(default=None, ge=0)
    buffalo_rate: Decimal | None = Field(default=None, ge=0)


class DebitUpdate(BaseModel):
    debit_amount: Decimal = Field(ge=0)


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    customer_code: str
    name: str
    phone: str | None
    cow_rate: Decimal | None
    buffalo_rate: Decimal | None
    debit_amount: Decimal
    created_at: datetime
    updated_at: datetime
