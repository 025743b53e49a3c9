from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.purchase_order import PurchaseOrderStatus
from src.domain.services.purchase_order_receiver import (
    ReceivingOutcome,
    accumulate_received,
    compute_status,
    receive,
)
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    order_id: UUID,
    received_quantities: Mapping[int | str, object],
    *,
    cumulative: bool = False,
) -> ReceivingOutcome:
    """Record one delivery against a purchase order.

    With ``cumulative`` the new status accounts for every earlier receiving
    of the order as well; the stored record still holds this session only.
    """
    if not role.can_update():
        raise PermissionDenied("Role not allowed to receive purchase orders")
    order = await uow.purchase_orders.get(tenant_id, order_id)
    if not order:
        raise NotFound("Purchase order not found")
    if order.status is PurchaseOrderStatus.RECEIVED:
        raise ConflictError("Purchase order is already fully received")

    outcome = receive(order, received_quantities)
    if cumulative:
        history = await uow.purchase_orders.list_receivings(tenant_id, order_id)
        status = compute_status(order.items, accumulate_received(history, received_quantities))
        outcome = ReceivingOutcome(
            new_status=status, record=replace(outcome.record, status=status)
        )

    await uow.purchase_orders.update(tenant_id, order_id, {"status": outcome.new_status})
    await uow.purchase_orders.add_receiving(outcome.record)
    await uow.commit()
    logger.info(
        "Purchase order %s received: %s -> %s",
        order.po_number,
        order.status.value,
        outcome.new_status.value,
    )
    return outcome
