from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, tenant_id: UUID, role: Role, order_id: UUID) -> None:
    if not role.can_delete():
        raise PermissionDenied("Only admins can delete purchase orders")
    if not await uow.purchase_orders.delete(tenant_id, order_id):
        raise NotFound("Purchase order not found")
    await uow.commit()
    logger.info("Purchase order %s deleted on tenant %s", order_id, tenant_id)
