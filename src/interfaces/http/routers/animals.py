from __future__ import annotations

from collections import Counter
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.application.errors import NotFound, PermissionDenied
from src.application.use_cases.animals import record_medical, register_animal
from src.domain.models.animal import AnimalType
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.passkey import ProtectedAction
from src.interfaces.http.deps import get_auth_context, get_uow, require_passkey
from src.interfaces.http.schemas.animals import (
    AnimalCreate,
    AnimalListResponse,
    AnimalResponse,
    MedicalRecordCreate,
    MedicalRecordResponse,
)

router = APIRouter(prefix="/animals", tags=["animals"])
medical_router = APIRouter(prefix="/medical-records", tags=["medical"])


@router.get("/", response_model=AnimalListResponse)
async def list_animals(context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)):
    items = await uow.animals.list(context.tenant_id)
    by_type = Counter(a.animal_type for a in items)
    counts = {t.value: by_type.get(t, 0) for t in AnimalType}
    counts["total"] = len(items)
    return AnimalListResponse(
        items=[AnimalResponse.model_validate(a) for a in items], counts=counts
    )


@router.post("/", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal(
    payload: AnimalCreate, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await register_animal.execute(
        uow,
        context.tenant_id,
        context.role,
        register_animal.RegisterAnimalInput(
            animal_type=payload.animal_type,
            entry_date=payload.entry_date,
            subtype=payload.subtype,
        ),
    )
    return AnimalResponse.model_validate(created)


@router.get("/{animal_code}", response_model=AnimalResponse)
async def get_animal(
    animal_code: str, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    animal = await uow.animals.get_by_code(context.tenant_id, animal_code)
    if not animal:
        raise NotFound("Animal not found")
    return AnimalResponse.model_validate(animal)


@router.delete(
    "/{animal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_passkey(ProtectedAction.DELETE_ANIMAL))],
)
async def delete_animal(
    animal_id: UUID, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    if not context.role.can_delete():
        raise PermissionDenied("Only admins can delete animals")
    if not await uow.animals.delete(context.tenant_id, animal_id):
        raise NotFound("Animal not found")
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@medical_router.get("/", response_model=list[MedicalRecordResponse])
async def list_medical_records(
    animal_code: str | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items = await uow.medical_records.list(context.tenant_id, animal_code=animal_code)
    return [MedicalRecordResponse.model_validate(item) for item in items]


@medical_router.post("/", response_model=MedicalRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_medical_record(
    payload: MedicalRecordCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    created = await record_medical.execute(
        uow,
        context.tenant_id,
        context.role,
        record_medical.RecordMedicalInput(**payload.model_dump()),
    )
    return MedicalRecordResponse.model_validate(created)


@medical_router.delete(
    "/{record_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_passkey(ProtectedAction.DELETE_MEDICAL_RECORD))],
)
async def delete_medical_record(
    record_id: UUID, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    if not context.role.can_delete():
        raise PermissionDenied("Only admins can delete medical records")
    if not await uow.medical_records.delete(context.tenant_id, record_id):
        raise NotFound("Medical record not found")
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
