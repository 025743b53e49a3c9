from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.purchasing.line_items import LineItemInput, build_line_items
from src.domain.models.purchase_order import PurchaseOrder, PurchaseOrderStatus
from src.domain.services.purchase_order_receiver import recompute_total
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class UpdatePurchaseOrderInput:
    version: int
    vendor: str | None = None
    items: list[LineItemInput] | None = None


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    order_id: UUID,
    payload: UpdatePurchaseOrderInput,
) -> PurchaseOrder:
    if not role.can_update():
        raise PermissionDenied("Role not allowed to edit purchase orders")
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await uow.purchase_orders.get(tenant_id, order_id)
    if not existing:
        raise NotFound("Purchase order not found")
    if existing.status is PurchaseOrderStatus.RECEIVED:
        raise ConflictError("A received purchase order can no longer be edited")
    data: dict = {}
    if payload.vendor is not None:
        vendor = payload.vendor.strip()
        if not vendor:
            raise ValidationError("Vendor is required")
        data["vendor"] = vendor
    if payload.items is not None:
        items = build_line_items(payload.items, existing.items)
        data["items"] = items
        data["total_amount"] = recompute_total(items)
    if not data:
        return existing
    updated = await uow.purchase_orders.update(
        tenant_id, order_id, data, expected_version=payload.version
    )
    if not updated:
        raise NotFound("Purchase order not found")
    await uow.commit()
    return updated
