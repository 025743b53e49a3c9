from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class PurchaseOrderStatus(str, Enum):
    PENDING = "Pending"
    PARTIALLY_RECEIVED = "Partially Received"
    RECEIVED = "Received"


@dataclass(slots=True, frozen=True)
class LineItem:
    item_id: int
    name: str
    qty: Decimal
    unit: str
    price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.qty * self.price


@dataclass(slots=True)
class PurchaseOrder:
    id: UUID
    tenant_id: UUID
    po_number: str
    vendor: str
    items: list[LineItem]
    total_amount: Decimal
    status: PurchaseOrderStatus = PurchaseOrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        *,
        tenant_id: UUID,
        po_number: str,
        vendor: str,
        items: list[LineItem],
        total_amount: Decimal,
    ) -> PurchaseOrder:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            po_number=po_number,
            vendor=vendor,
            items=list(items),
            total_amount=total_amount,
            status=PurchaseOrderStatus.PENDING,
            created_at=now,
            updated_at=now,
            version=1,
        )


@dataclass(slots=True, frozen=True)
class ReceivedLine:
    item_id: int
    name: str
    qty: Decimal
    unit: str
    price: Decimal
    received_qty: Decimal


@dataclass(slots=True, frozen=True)
class ReceivingRecord:
    """Snapshot of one delivery against a purchase order. Append-only."""

    id: UUID
    tenant_id: UUID
    purchase_order_id: UUID
    po_number: str
    vendor: str
    items: tuple[ReceivedLine, ...]
    received_at: datetime
    status: PurchaseOrderStatus
