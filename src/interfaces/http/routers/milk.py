from __future__ import annotations

from datetime import date as DtDate

from fastapi import APIRouter, Depends

from src.application.use_cases.milk import save_farm_total, save_shift_entry
from src.domain.models.daily_shift_record import DailyShiftRecord
from src.domain.models.farm_production import FarmProduction
from src.domain.value_objects.milk import Shift, Species
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.milk import (
    FarmProductionResponse,
    FarmTotalUpdate,
    ShiftEntriesResponse,
    ShiftEntryUpdate,
)

router = APIRouter(prefix="/milk", tags=["milk"])


@router.get("/shift-entries/{day}", response_model=ShiftEntriesResponse)
async def get_shift_entries(
    day: DtDate, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    record = await uow.shift_records.get(context.tenant_id, day)
    # An unrecorded day reads as four empty sheets
    return ShiftEntriesResponse.model_validate(
        record or DailyShiftRecord(tenant_id=context.tenant_id, date=day)
    )


@router.put("/shift-entries/{day}/{species}/{shift}", response_model=ShiftEntriesResponse)
async def put_shift_entry(
    day: DtDate,
    species: Species,
    shift: Shift,
    payload: ShiftEntryUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    record = await save_shift_entry.execute(
        uow, context.tenant_id, context.role, day, species, shift, payload.quantities
    )
    return ShiftEntriesResponse.model_validate(record)


@router.get("/farm-production/{day}", response_model=FarmProductionResponse)
async def get_farm_production(
    day: DtDate, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    production = await uow.farm_production.get(context.tenant_id, day)
    return FarmProductionResponse.model_validate(
        production or FarmProduction(tenant_id=context.tenant_id, date=day)
    )


@router.put("/farm-production/{day}", response_model=FarmProductionResponse)
async def put_farm_production(
    day: DtDate,
    payload: FarmTotalUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    production = await save_farm_total.execute(
        uow, context.tenant_id, context.role, day, payload.species, payload.shift, payload.total
    )
    return FarmProductionResponse.model_validate(production)
