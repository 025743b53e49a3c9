from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from starlette.concurrency import run_in_threadpool

from src.application.errors import NotFound
from src.application.use_cases.purchasing import (
    create_purchase_order,
    delete_purchase_order,
    receive_purchase_order,
    update_purchase_order,
)
from src.application.use_cases.purchasing.line_items import LineItemInput
from src.config.settings import Settings
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.passkey import ProtectedAction
from src.infrastructure.reports.report_service import ReportService
from src.interfaces.http.deps import (
    get_app_settings,
    get_auth_context,
    get_report_service,
    get_uow,
    require_passkey,
)
from src.interfaces.http.schemas.purchase_orders import (
    LineItemSchema,
    PurchaseOrderCreate,
    PurchaseOrderResponse,
    PurchaseOrderUpdate,
    ReceiveRequest,
    ReceiveResponse,
    ReceivingRecordResponse,
)
from src.interfaces.http.schemas.reports import ReportResponse

router = APIRouter(prefix="/purchase-orders", tags=["purchase-orders"])


def _line_inputs(items: list[LineItemSchema]) -> list[LineItemInput]:
    return [
        LineItemInput(
            name=item.name, qty=item.qty, unit=item.unit, price=item.price, item_id=item.item_id
        )
        for item in items
    ]


@router.get("/", response_model=list[PurchaseOrderResponse])
async def list_purchase_orders(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    items = await uow.purchase_orders.list(context.tenant_id)
    return [PurchaseOrderResponse.model_validate(item) for item in items]


@router.post(
    "/",
    response_model=PurchaseOrderResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_passkey(ProtectedAction.CREATE_PURCHASE_ORDER))],
)
async def create(
    payload: PurchaseOrderCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    created = await create_purchase_order.execute(
        uow,
        context.tenant_id,
        context.role,
        create_purchase_order.CreatePurchaseOrderInput(
            vendor=payload.vendor, items=_line_inputs(payload.items)
        ),
    )
    return PurchaseOrderResponse.model_validate(created)


@router.get("/{order_id}", response_model=PurchaseOrderResponse)
async def get_purchase_order(
    order_id: UUID, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    order = await uow.purchase_orders.get(context.tenant_id, order_id)
    if not order:
        raise NotFound("Purchase order not found")
    return PurchaseOrderResponse.model_validate(order)


@router.put(
    "/{order_id}",
    response_model=PurchaseOrderResponse,
    dependencies=[Depends(require_passkey(ProtectedAction.EDIT_PURCHASE_ORDER))],
)
async def update(
    order_id: UUID,
    payload: PurchaseOrderUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await update_purchase_order.execute(
        uow,
        context.tenant_id,
        context.role,
        order_id,
        update_purchase_order.UpdatePurchaseOrderInput(
            version=payload.version,
            vendor=payload.vendor,
            items=_line_inputs(payload.items) if payload.items is not None else None,
        ),
    )
    return PurchaseOrderResponse.model_validate(updated)


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_passkey(ProtectedAction.DELETE_PURCHASE_ORDER))],
)
async def delete(
    order_id: UUID, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    await delete_purchase_order.execute(uow, context.tenant_id, context.role, order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{order_id}/receive",
    response_model=ReceiveResponse,
    dependencies=[Depends(require_passkey(ProtectedAction.RECEIVE_PURCHASE_ORDER))],
)
async def receive(
    order_id: UUID,
    payload: ReceiveRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
):
    outcome = await receive_purchase_order.execute(
        uow,
        context.tenant_id,
        context.role,
        order_id,
        payload.received_quantities,
        cumulative=settings.po_cumulative_receiving,
    )
    return ReceiveResponse(
        status=outcome.new_status,
        record=ReceivingRecordResponse.model_validate(outcome.record),
    )


@router.get("/{order_id}/receivings", response_model=list[ReceivingRecordResponse])
async def list_receivings(
    order_id: UUID, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    if not await uow.purchase_orders.get(context.tenant_id, order_id):
        raise NotFound("Purchase order not found")
    records = await uow.purchase_orders.list_receivings(context.tenant_id, order_id)
    return [ReceivingRecordResponse.model_validate(record) for record in records]


@router.get(
    "/{order_id}/pdf",
    response_model=ReportResponse,
    dependencies=[Depends(require_passkey(ProtectedAction.PURCHASE_ORDER_PDF))],
)
async def purchase_order_pdf(
    order_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    report_service: ReportService = Depends(get_report_service),
):
    order = await uow.purchase_orders.get(context.tenant_id, order_id)
    if not order:
        raise NotFound("Purchase order not found")
    receivings = await uow.purchase_orders.list_receivings(context.tenant_id, order_id)
    profile = await uow.farm_profiles.get(context.tenant_id)
    return await run_in_threadpool(report_service.purchase_order, order, receivings, profile)
