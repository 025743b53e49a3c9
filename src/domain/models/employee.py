from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    RECEIVED = "Received"


@dataclass(slots=True)
class Employee:
    id: UUID
    tenant_id: UUID
    name: str
    role: str
    salary: Decimal
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, *, tenant_id: UUID, name: str, role: str, salary: Decimal) -> Employee:
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            name=name,
            role=role,
            salary=salary,
            created_at=datetime.now(timezone.utc),
        )


@dataclass(slots=True)
class EmployeePayment:
    id: UUID
    tenant_id: UUID
    employee_id: UUID
    employee_name: str
    amount: Decimal
    date: date
    status: PaymentStatus = PaymentStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def issue(
        cls, *, tenant_id: UUID, employee: Employee, amount: Decimal, date: date
    ) -> EmployeePayment:
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            employee_id=employee.id,
            employee_name=employee.name,
            amount=amount,
            date=date,
            status=PaymentStatus.PENDING,
            created_at=datetime.now(timezone.utc),
        )

    def toggled_status(self) -> PaymentStatus:
        if self.status is PaymentStatus.PENDING:
            return PaymentStatus.RECEIVED
        return PaymentStatus.PENDING
