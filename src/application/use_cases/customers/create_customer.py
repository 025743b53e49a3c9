from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.application.errors import ConflictError, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.customer import Customer
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateCustomerInput:
    customer_code: str
    name: str
    phone: str | None = None
    cow_rate: Decimal | None = None
    buffalo_rate: Decimal | None = None


def validate_customer_code(code: str) -> str:
    value = code.strip()
    if not value.isdigit():
        raise ValidationError("Customer code must contain digits only")
    return value


async def execute(
    uow: UnitOfWork, tenant_id: UUID, role: Role, payload: CreateCustomerInput
) -> Customer:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to create customers")
    code = validate_customer_code(payload.customer_code)
    if await uow.customers.get_by_code(tenant_id, code):
        raise ConflictError(f"Customer code {code} already exists")
    customer = Customer.create(
        tenant_id=tenant_id,
        customer_code=code,
        name=payload.name.strip(),
        phone=payload.phone,
        cow_rate=payload.cow_rate,
        buffalo_rate=payload.buffalo_rate,
    )
    created = await uow.customers.add(customer)
    await uow.commit()
    return created
