from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from src.domain.models.purchase_order import (
    LineItem,
    PurchaseOrder,
    PurchaseOrderStatus,
    ReceivedLine,
    ReceivingRecord,
)
from src.domain.services.billing_aggregator import parse_quantity

ZERO = Decimal("0")


@dataclass(slots=True, frozen=True)
class ReceivingOutcome:
    new_status: PurchaseOrderStatus
    record: ReceivingRecord


def recompute_total(items: Iterable[LineItem]) -> Decimal:
    """Order total from scratch; called on every item edit."""
    return sum((item.qty * item.price for item in items), ZERO)


def received_for(item: LineItem, received_quantities: Mapping[int | str, object]) -> Decimal:
    # JSON bodies deliver item ids as strings
    raw = received_quantities.get(item.item_id)
    if raw is None:
        raw = received_quantities.get(str(item.item_id))
    return parse_quantity(raw)


def compute_status(
    items: Iterable[LineItem], received_quantities: Mapping[int | str, object]
) -> PurchaseOrderStatus:
    """Status from the items delivered in full.

    Only items at or above their ordered quantity count; a line that got 1 of
    10 units is treated like an untouched line. Over-delivery is accepted.
    """
    items = list(items)
    fully_received = sum(
        1 for item in items if received_for(item, received_quantities) >= item.qty
    )
    if fully_received == len(items):
        return PurchaseOrderStatus.RECEIVED
    if fully_received > 0:
        return PurchaseOrderStatus.PARTIALLY_RECEIVED
    return PurchaseOrderStatus.PENDING


def receive(
    order: PurchaseOrder,
    received_quantities: Mapping[int | str, object],
    *,
    received_at: datetime | None = None,
) -> ReceivingOutcome:
    """Evaluate one receiving session against ``order``.

    Quantities are the amounts delivered in this session only. The returned
    record snapshots every line (untouched lines with ``received_qty`` 0); the
    order itself is left as is for the caller to persist.
    """
    status = compute_status(order.items, received_quantities)
    lines = tuple(
        ReceivedLine(
            item_id=item.item_id,
            name=item.name,
            qty=item.qty,
            unit=item.unit,
            price=item.price,
            received_qty=received_for(item, received_quantities),
        )
        for item in order.items
    )
    record = ReceivingRecord(
        id=uuid4(),
        tenant_id=order.tenant_id,
        purchase_order_id=order.id,
        po_number=order.po_number,
        vendor=order.vendor,
        items=lines,
        received_at=received_at or datetime.now(timezone.utc),
        status=status,
    )
    return ReceivingOutcome(new_status=status, record=record)


def accumulate_received(
    history: Iterable[ReceivingRecord], current: Mapping[int | str, object]
) -> dict[int, Decimal]:
    """Per-item quantities delivered so far, including the current session.

    Used only when cumulative receiving is switched on; by default a session
    is judged on its own quantities.
    """
    totals: dict[int, Decimal] = {}
    for record in history:
        for line in record.items:
            totals[line.item_id] = totals.get(line.item_id, ZERO) + line.received_qty
    for key, raw in current.items():
        try:
            item_id = int(key)
        except (TypeError, ValueError):
            continue
        totals[item_id] = totals.get(item_id, ZERO) + parse_quantity(raw)
    return totals
