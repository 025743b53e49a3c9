from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.purchase_order import PurchaseOrder, ReceivingRecord


class PurchaseOrdersRepository(Protocol):
    async def add(self, order: PurchaseOrder) -> PurchaseOrder: ...
    async def get(self, tenant_id: UUID, order_id: UUID) -> PurchaseOrder | None: ...
    async def list(self, tenant_id: UUID) -> list[PurchaseOrder]: ...
    async def next_po_number(self, tenant_id: UUID) -> str: ...
    async def update(
        self, tenant_id: UUID, order_id: UUID, data: dict, expected_version: int | None = None
    ) -> PurchaseOrder | None: ...
    async def delete(self, tenant_id: UUID, order_id: UUID) -> bool: ...
    async def add_receiving(self, record: ReceivingRecord) -> ReceivingRecord: ...
    async def list_receivings(self, tenant_id: UUID, order_id: UUID) -> list[ReceivingRecord]: ...
