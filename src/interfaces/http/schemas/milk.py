from __future__ import annotations

from datetime import date as DtDate
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from src.domain.value_objects.milk import Shift, Species


class ShiftEntryUpdate(BaseModel):
    # customer code -> quantity as typed; numbers are accepted too
    quantities: dict[str, str | int | float | None]


class ShiftEntriesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: DtDate
    cow_morning: dict[str, str]
    cow_evening: dict[str, str]
    buffalo_morning: dict[str, str]
    buffalo_evening: dict[str, str]


class FarmTotalUpdate(BaseModel):
    species: Species
    shift: Shift
    total: str | int | float | None = None


class FarmProductionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: DtDate
    cow_morning_total: Decimal
    cow_evening_total: Decimal
    buffalo_morning_total: Decimal
    buffalo_evening_total: Decimal
    cow_total: Decimal
    buffalo_total: Decimal
    total: Decimal
