from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.application.errors import NotFound, PermissionDenied
from src.application.use_cases.payroll import issue_payment, toggle_payment
from src.domain.models.employee import Employee
from src.domain.services.farm_summary import summarize_payments
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.passkey import ProtectedAction
from src.interfaces.http.deps import get_auth_context, get_uow, require_passkey
from src.interfaces.http.schemas.payroll import (
    EmployeeCreate,
    EmployeeResponse,
    PaymentCreate,
    PaymentResponse,
    PaymentSummaryResponse,
)

router = APIRouter(prefix="/payroll", tags=["payroll"])


@router.get("/employees", response_model=list[EmployeeResponse])
async def list_employees(context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)):
    items = await uow.employees.list(context.tenant_id)
    return [EmployeeResponse.model_validate(item) for item in items]


@router.post("/employees", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeCreate, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    if not context.role.can_create():
        raise PermissionDenied("Role not allowed to add employees")
    employee = Employee.create(
        tenant_id=context.tenant_id,
        name=payload.name.strip(),
        role=payload.role.strip(),
        salary=payload.salary,
    )
    created = await uow.employees.add(employee)
    await uow.commit()
    return EmployeeResponse.model_validate(created)


@router.delete(
    "/employees/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_passkey(ProtectedAction.DELETE_EMPLOYEE))],
)
async def delete_employee(
    employee_id: UUID, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    if not context.role.can_delete():
        raise PermissionDenied("Only admins can remove employees")
    if not await uow.employees.delete(context.tenant_id, employee_id):
        raise NotFound("Employee not found")
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/payments", response_model=list[PaymentResponse])
async def list_payments(
    employee_id: UUID | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items = await uow.employee_payments.list(context.tenant_id, employee_id=employee_id)
    return [PaymentResponse.model_validate(item) for item in items]


@router.post("/payments", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payload: PaymentCreate, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await issue_payment.execute(
        uow,
        context.tenant_id,
        context.role,
        payload.employee_id,
        amount=payload.amount,
        day=payload.date,
    )
    return PaymentResponse.model_validate(created)


@router.post("/payments/{payment_id}/toggle", response_model=PaymentResponse)
async def toggle(
    payment_id: UUID, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    updated = await toggle_payment.execute(uow, context.tenant_id, context.role, payment_id)
    return PaymentResponse.model_validate(updated)


@router.get("/summary", response_model=PaymentSummaryResponse)
async def payment_summary(context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)):
    totals = summarize_payments(await uow.employee_payments.list(context.tenant_id))
    return PaymentSummaryResponse(paid=totals.paid, pending=totals.pending)
