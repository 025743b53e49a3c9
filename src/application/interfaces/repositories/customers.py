from __future__ import annotations

from decimal import Decimal
from typing import Protocol
from uuid import UUID

from src.domain.models.customer import Customer


class CustomersRepository(Protocol):
    async def add(self, customer: Customer) -> Customer: ...
    async def list(self, tenant_id: UUID) -> list[Customer]: ...
    async def get_by_code(self, tenant_id: UUID, customer_code: str) -> Customer | None: ...
    async def update(
        self, tenant_id: UUID, customer_code: str, data: dict
    ) -> Customer | None: ...
    async def set_debit(
        self, tenant_id: UUID, customer_code: str, debit_amount: Decimal
    ) -> Customer | None: ...
    async def delete(self, tenant_id: UUID, customer_code: str) -> bool: ...
