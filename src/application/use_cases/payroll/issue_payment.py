from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.employee import EmployeePayment
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    employee_id: UUID,
    *,
    amount: Decimal | None,
    day: date,
) -> EmployeePayment:
    """Issue a payment to an employee; defaults to their salary when no amount is given."""
    if not role.can_create():
        raise PermissionDenied("Role not allowed to issue payments")
    employee = await uow.employees.get(tenant_id, employee_id)
    if not employee:
        raise NotFound("Employee not found")
    value = employee.salary if amount is None else amount
    if value <= 0:
        raise ValidationError("Payment amount must be positive")
    payment = EmployeePayment.issue(tenant_id=tenant_id, employee=employee, amount=value, date=day)
    created = await uow.employee_payments.add(payment)
    await uow.commit()
    return created
