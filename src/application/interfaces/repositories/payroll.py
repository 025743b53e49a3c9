from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.employee import Employee, EmployeePayment, PaymentStatus


class EmployeesRepository(Protocol):
    async def add(self, employee: Employee) -> Employee: ...
    async def get(self, tenant_id: UUID, employee_id: UUID) -> Employee | None: ...
    async def list(self, tenant_id: UUID) -> list[Employee]: ...
    async def delete(self, tenant_id: UUID, employee_id: UUID) -> bool: ...


class EmployeePaymentsRepository(Protocol):
    async def add(self, payment: EmployeePayment) -> EmployeePayment: ...
    async def get(self, tenant_id: UUID, payment_id: UUID) -> EmployeePayment | None: ...
    async def list(
        self, tenant_id: UUID, *, employee_id: UUID | None = None
    ) -> list[EmployeePayment]: ...
    async def set_status(
        self, tenant_id: UUID, payment_id: UUID, status: PaymentStatus
    ) -> EmployeePayment | None: ...
