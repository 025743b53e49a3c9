from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.application.errors import NotFound, PermissionDenied
from src.domain.models.cash_entry import CashEntry
from src.domain.models.expense import Expense
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.passkey import ProtectedAction
from src.interfaces.http.deps import get_auth_context, get_uow, require_passkey
from src.interfaces.http.schemas.ledger import (
    CashEntryCreate,
    CashEntryResponse,
    ExpenseCreate,
    ExpenseResponse,
)

cash_router = APIRouter(prefix="/cash-entries", tags=["cash"])
expenses_router = APIRouter(prefix="/expenses", tags=["expenses"])


@cash_router.get("/", response_model=list[CashEntryResponse])
async def list_cash_entries(
    date_from: DtDate | None = Query(None),
    date_to: DtDate | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items = await uow.cash_entries.list(context.tenant_id, date_from=date_from, date_to=date_to)
    return [CashEntryResponse.model_validate(item) for item in items]


@cash_router.post("/", response_model=CashEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_cash_entry(
    payload: CashEntryCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    if not context.role.can_record():
        raise PermissionDenied("Role not allowed to record cash")
    entry = CashEntry.create(
        tenant_id=context.tenant_id,
        date=payload.date,
        description=payload.description.strip(),
        amount=payload.amount,
        entry_type=payload.entry_type,
    )
    created = await uow.cash_entries.add(entry)
    await uow.commit()
    return CashEntryResponse.model_validate(created)


@cash_router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_passkey(ProtectedAction.DELETE_CASH_ENTRY))],
)
async def delete_cash_entry(
    entry_id: UUID, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    if not context.role.can_delete():
        raise PermissionDenied("Only admins can delete cash entries")
    if not await uow.cash_entries.delete(context.tenant_id, entry_id):
        raise NotFound("Cash entry not found")
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@expenses_router.get("/", response_model=list[ExpenseResponse])
async def list_expenses(
    date_from: DtDate | None = Query(None),
    date_to: DtDate | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items = await uow.expenses.list(context.tenant_id, date_from=date_from, date_to=date_to)
    return [ExpenseResponse.model_validate(item) for item in items]


@expenses_router.post("/", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    payload: ExpenseCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    if not context.role.can_record():
        raise PermissionDenied("Role not allowed to record expenses")
    expense = Expense.create(
        tenant_id=context.tenant_id,
        date=payload.date,
        item=payload.item.strip(),
        amount=payload.amount,
        category=payload.category,
        notes=payload.notes,
    )
    created = await uow.expenses.add(expense)
    await uow.commit()
    return ExpenseResponse.model_validate(created)


@expenses_router.delete(
    "/{expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_passkey(ProtectedAction.DELETE_EXPENSE))],
)
async def delete_expense(
    expense_id: UUID, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    if not context.role.can_delete():
        raise PermissionDenied("Only admins can delete expenses")
    if not await uow.expenses.delete(context.tenant_id, expense_id):
        raise NotFound("Expense not found")
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
