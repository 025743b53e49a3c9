from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.employee import PaymentStatus


class EmployeeCreate(BaseModel):
    name: str = Field(min_length=1)
    role: str = Field(min_length=1)
    salary: Decimal = Field(ge=0)


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    role: str
    salary: Decimal
    created_at: datetime


class PaymentCreate(BaseModel):
    employee_id: UUID
    date: DtDate
    amount: Decimal | None = Field(default=None, gt=0)


class PaymentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    employee_id: UUID
    employee_name: str
    amount: Decimal
    date: DtDate
    status: PaymentStatus
    created_at: datetime


class PaymentSummaryResponse(BaseModel):
    paid: Decimal
    pending: Decimal
