from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from src.application.errors import NotFound
from src.application.use_cases.customers import (
    create_customer,
    delete_customer,
    set_debit,
    update_customer,
)
from src.domain.services.billing_aggregator import ZERO, customer_sort_key
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.passkey import ProtectedAction
from src.interfaces.http.deps import get_auth_context, get_uow, require_passkey
from src.interfaces.http.schemas.customers import (
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
    DebitUpdate,
)

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/", response_model=list[CustomerResponse])
async def list_customers(context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)):
    items = await uow.customers.list(context.tenant_id)
    items.sort(key=lambda c: customer_sort_key(c.customer_code))
    return [CustomerResponse.model_validate(item) for item in items]


@router.post("/", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create(
    payload: CustomerCreate, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await create_customer.execute(
        uow,
        context.tenant_id,
        context.role,
        create_customer.CreateCustomerInput(**payload.model_dump()),
    )
    return CustomerResponse.model_validate(created)


@router.get("/{customer_code}", response_model=CustomerResponse)
async def get_customer(
    customer_code: str, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    customer = await uow.customers.get_by_code(context.tenant_id, customer_code)
    if not customer:
        raise NotFound("Customer not found")
    return CustomerResponse.model_validate(customer)


@router.put("/{customer_code}", response_model=CustomerResponse)
async def update(
    customer_code: str,
    payload: CustomerUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    # Only fields present in the body change; an explicit null clears a rate
    updated = await update_customer.execute(
        uow,
        context.tenant_id,
        context.role,
        customer_code,
        update_customer.UpdateCustomerInput(**payload.model_dump(exclude_unset=True)),
    )
    return CustomerResponse.model_validate(updated)


@router.delete(
    "/{customer_code}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_passkey(ProtectedAction.DELETE_CUSTOMER))],
)
async def delete(
    customer_code: str, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    await delete_customer.execute(uow, context.tenant_id, context.role, customer_code)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{customer_code}/debit",
    response_model=CustomerResponse,
    dependencies=[Depends(require_passkey(ProtectedAction.SET_CUSTOMER_DEBIT))],
)
async def put_debit(
    customer_code: str,
    payload: DebitUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await set_debit.execute(
        uow, context.tenant_id, context.role, customer_code, payload.debit_amount
    )
    return CustomerResponse.model_validate(updated)


@router.delete(
    "/{customer_code}/debit",
    response_model=CustomerResponse,
    dependencies=[Depends(require_passkey(ProtectedAction.CLEAR_CUSTOMER_DEBIT))],
)
async def clear_debit(
    customer_code: str, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    updated = await set_debit.execute(uow, context.tenant_id, context.role, customer_code, ZERO)
    return CustomerResponse.model_validate(updated)
