from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.employee import EmployeePayment
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork, tenant_id: UUID, role: Role, payment_id: UUID
) -> EmployeePayment:
    if not role.can_update():
        raise PermissionDenied("Role not allowed to update payments")
    payment = await uow.employee_payments.get(tenant_id, payment_id)
    if not payment:
        raise NotFound("Payment not found")
    updated = await uow.employee_payments.set_status(
        tenant_id, payment_id, payment.toggled_status()
    )
    if not updated:
        raise NotFound("Payment not found")
    await uow.commit()
    logger.info("Payment %s marked %s", payment_id, updated.status.value)
    return updated
