from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.purchasing.line_items import LineItemInput, build_line_items
from src.domain.models.purchase_order import PurchaseOrder
from src.domain.services.purchase_order_receiver import recompute_total
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreatePurchaseOrderInput:
    vendor: str
    items: list[LineItemInput]


async def execute(
    uow: UnitOfWork, tenant_id: UUID, role: Role, payload: CreatePurchaseOrderInput
) -> PurchaseOrder:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to create purchase orders")
    vendor = payload.vendor.strip()
    if not vendor:
        raise ValidationError("Vendor is required")
    items = build_line_items(payload.items)
    order = PurchaseOrder.create(
        tenant_id=tenant_id,
        po_number=await uow.purchase_orders.next_po_number(tenant_id),
        vendor=vendor,
        items=items,
        total_amount=recompute_total(items),
    )
    created = await uow.purchase_orders.add(order)
    await uow.commit()
    logger.info("Purchase order %s created for tenant %s", created.po_number, tenant_id)
    return created
