from __future__ import annotations

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
from src.domain.services.purchase_order_receiver import (
    accumulate_received,
    compute_status,
    receive,
    recompute_total,
)


def make_order(*quantities: str) -> PurchaseOrder:
    items = [
        LineItem(item_id=i, name=f"Item {i}", qty=Decimal(q), unit="kg", price=Decimal("10"))
        for i, q in enumerate(quantities, start=1)
    ]
    return PurchaseOrder.create(
        tenant_id=uuid4(),
        po_number="PO-000001",
        vendor="Feed Co",
        items=items,
        total_amount=recompute_total(items),
    )


def test_status_boundaries():
    order = make_order("10", "5")

    assert receive(order, {1: 10, 2: 5}).new_status is PurchaseOrderStatus.RECEIVED
    assert receive(order, {1: 10, 2: 0}).new_status is PurchaseOrderStatus.PARTIALLY_RECEIVED
    assert receive(order, {1: 0, 2: 0}).new_status is PurchaseOrderStatus.PENDING


def test_partial_quantity_on_a_line_does_not_count():
    order = make_order("10", "5")
    assert receive(order, {1: 9, 2: 4}).new_status is PurchaseOrderStatus.PENDING


def test_over_receipt_counts_as_full():
    order = make_order("10")
    outcome = receive(order, {"1": "25"})

    assert outcome.new_status is PurchaseOrderStatus.RECEIVED
    assert outcome.record.items[0].received_qty == Decimal("25")


def test_same_quantities_give_same_status():
    order = make_order("3", "4", "5")
    quantities = {1: 3, 2: "2"}
    assert receive(order, quantities).new_status == receive(order, quantities).new_status


def test_record_snapshots_every_line_and_leaves_order_alone():
    order = make_order("10", "5")
    at = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
    outcome = receive(order, {"2": "5", "99": "1"}, received_at=at)

    record = outcome.record
    assert [line.item_id for line in record.items] == [1, 2]
    assert [line.received_qty for line in record.items] == [Decimal("0"), Decimal("5")]
    assert record.received_at == at
    assert record.purchase_order_id == order.id
    assert record.po_number == "PO-000001"
    assert record.status is PurchaseOrderStatus.PARTIALLY_RECEIVED
    assert order.status is PurchaseOrderStatus.PENDING


def test_unreadable_quantities_count_as_zero():
    order = make_order("1")
    assert compute_status(order.items, {1: "lots"}) is PurchaseOrderStatus.PENDING


def test_recompute_total():
    items = [
        LineItem(item_id=1, name="Bran", qty=Decimal("3"), unit="bag", price=Decimal("100")),
        LineItem(item_id=2, name="Salt", qty=Decimal("2"), unit="kg", price=Decimal("50")),
    ]
    assert recompute_total(items) == Decimal("400")
    assert recompute_total([]) == Decimal("0")


def test_accumulate_received_adds_history_to_current_session():
    order = make_order("10", "5")
    first = ReceivingRecord(
        id=uuid4(),
        tenant_id=order.tenant_id,
        purchase_order_id=order.id,
        po_number=order.po_number,
        vendor=order.vendor,
        items=(
            ReceivedLine(1, "Item 1", Decimal("10"), "kg", Decimal("10"), Decimal("6")),
            ReceivedLine(2, "Item 2", Decimal("5"), "kg", Decimal("10"), Decimal("5")),
        ),
        received_at=datetime.now(timezone.utc),
        status=PurchaseOrderStatus.PARTIALLY_RECEIVED,
    )
    totals = accumulate_received([first], {"1": "4", "bogus": "3"})

    assert totals == {1: Decimal("10"), 2: Decimal("5")}
    assert compute_status(order.items, totals) is PurchaseOrderStatus.RECEIVED
