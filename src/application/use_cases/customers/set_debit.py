from __future__ import annotations

import logging
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.customer import Customer
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    customer_code: str,
    debit_amount: Decimal,
) -> Customer:
    """Set the standing debit subtracted from the customer's next settlement.

    Passing zero clears it.
    """
    if not role.can_update():
        raise PermissionDenied("Role not allowed to change customer debits")
    if debit_amount < 0:
        raise ValidationError("Debit amount cannot be negative")
    updated = await uow.customers.set_debit(tenant_id, customer_code, debit_amount)
    if not updated:
        raise NotFound("Customer not found")
    await uow.commit()
    logger.info(
        "Debit for customer %s on tenant %s set to %s", customer_code, tenant_id, debit_amount
    )
    return updated
