from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.application.errors import NotFound, PermissionDenied
from src.domain.models.consumption import ConsumptionItem
from src.domain.models.note import Note
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.tools import (
    ConsumptionCreate,
    ConsumptionResponse,
    NoteCreate,
    NoteResponse,
)

notes_router = APIRouter(prefix="/notes", tags=["notes"])
consumption_router = APIRouter(prefix="/consumption", tags=["consumption"])


@notes_router.get("/", response_model=list[NoteResponse])
async def list_notes(context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)):
    items = await uow.notes.list(context.tenant_id)
    return [NoteResponse.model_validate(item) for item in items]


@notes_router.post("/", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    payload: NoteCreate, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    if not context.role.can_record():
        raise PermissionDenied("Role not allowed to write notes")
    note = Note.create(
        tenant_id=context.tenant_id,
        topic=payload.topic.strip(),
        date=payload.date,
        description=payload.description,
        remarks=payload.remarks,
    )
    created = await uow.notes.add(note)
    await uow.commit()
    return NoteResponse.model_validate(created)


@notes_router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: UUID, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    if not context.role.can_delete():
        raise PermissionDenied("Only admins can delete notes")
    if not await uow.notes.delete(context.tenant_id, note_id):
        raise NotFound("Note not found")
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@consumption_router.get("/", response_model=list[ConsumptionResponse])
async def list_consumption(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    items = await uow.consumption.list(context.tenant_id)
    return [ConsumptionResponse.model_validate(item) for item in items]


@consumption_router.post(
    "/", response_model=ConsumptionResponse, status_code=status.HTTP_201_CREATED
)
async def create_consumption(
    payload: ConsumptionCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    if not context.role.can_record():
        raise PermissionDenied("Role not allowed to log consumption")
    item = ConsumptionItem.create(
        tenant_id=context.tenant_id,
        name=payload.name.strip(),
        qty=payload.qty,
        unit=payload.unit.strip(),
        date=payload.date,
        notes=payload.notes,
    )
    created = await uow.consumption.add(item)
    await uow.commit()
    return ConsumptionResponse.model_validate(created)


@consumption_router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_consumption(
    item_id: UUID, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    if not context.role.can_delete():
        raise PermissionDenied("Only admins can delete consumption entries")
    if not await uow.consumption.delete(context.tenant_id, item_id):
        raise NotFound("Consumption entry not found")
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
