from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.customer import Customer
from src.domain.value_objects.role import Role

_UNSET = object()


@dataclass(slots=True)
class UpdateCustomerInput:
    name: str | None = None
    phone: str | None = None
    # Rates may be cleared explicitly, so "not given" is a separate sentinel
    cow_rate: Decimal | None | object = _UNSET
    buffalo_rate: Decimal | None | object = _UNSET


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    customer_code: str,
    payload: UpdateCustomerInput,
) -> Customer:
    if not role.can_update():
        raise PermissionDenied("Role not allowed to update customers")
    existing = await uow.customers.get_by_code(tenant_id, customer_code)
    if not existing:
        raise NotFound("Customer not found")
    data: dict = {}
    if payload.name is not None:
        data["name"] = payload.name.strip()
    if payload.phone is not None:
        data["phone"] = payload.phone
    for field_name in ("cow_rate", "buffalo_rate"):
        value = getattr(payload, field_name)
        if value is not _UNSET:
            data[field_name] = value
    if not data:
        return existing
    updated = await uow.customers.update(tenant_id, customer_code, data)
    if not updated:
        raise NotFound("Customer not found")
    await uow.commit()
    return updated
