from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.animal import AnimalType, CalfSubtype


class AnimalCreate(BaseModel):
    animal_type: AnimalType
    entry_date: DtDate
    subtype: CalfSubtype | None = None


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    animal_code: str
    animal_type: AnimalType
    subtype: CalfSubtype | None
    entry_date: DtDate
    created_at: datetime


class AnimalListResponse(BaseModel):
    items: list[AnimalResponse]
    counts: dict[str, int]


class MedicalRecordCreate(BaseModel):
    animal_code: str = Field(min_length=1)
    diagnosis: str
    treatment: str
    date: DtDate
    cost: str | int | float | None = None
    notes: str | None = None


class MedicalRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    animal_code: str
    animal_type: str
    diagnosis: str
    treatment: str
    date: DtDate
    cost: Decimal
    notes: str | None
    created_at: datetime
