from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, tenant_id: UUID, role: Role, customer_code: str) -> None:
    # Shift sheets keep the code; billing skips it once the customer is gone
    if not role.can_delete():
        raise PermissionDenied("Only admins can delete customers")
    if not await uow.customers.delete(tenant_id, customer_code):
        raise NotFound("Customer not found")
    await uow.commit()
    logger.info("Customer %s deleted on tenant %s", customer_code, tenant_id)
