from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import ConflictError, PermissionDenied, ValidationError
from src.application.use_cases.purchasing import (
    create_purchase_order,
    receive_purchase_order,
    update_purchase_order,
)
from src.application.use_cases.purchasing.line_items import LineItemInput, build_line_items
from src.domain.models.purchase_order import PurchaseOrder, PurchaseOrderStatus
from src.domain.value_objects.role import Role


class StubPurchaseOrders:
    def __init__(self) -> None:
        self.orders: dict = {}
        self.receivings: list = []

    async def next_po_number(self, tenant_id):
        return f"PO-{len(self.orders) + 1:06d}"

    async def add(self, order: PurchaseOrder) -> PurchaseOrder:
        self.orders[order.id] = order
        return order

    async def get(self, tenant_id, order_id):
        return self.orders.get(order_id)

    async def update(self, tenant_id, order_id, data, expected_version=None):
        order = self.orders.get(order_id)
        if order is None:
            return None
        if expected_version is not None and order.version != expected_version:
            raise ConflictError("Version conflict")
        order = replace(order, version=order.version + 1, **data)
        self.orders[order_id] = order
        return order

    async def add_receiving(self, record):
        self.receivings.append(record)
        return record

    async def list_receivings(self, tenant_id, order_id):
        return [r for r in self.receivings if r.purchase_order_id == order_id]


def make_uow(repo):
    async def commit():
        return None

    return SimpleNamespace(purchase_orders=repo, commit=commit)


def items(*specs) -> list[LineItemInput]:
    return [
        LineItemInput(name=name, qty=Decimal(qty), unit="kg", price=Decimal(price))
        for name, qty, price in specs
    ]


async def create_order(uow, tenant, *specs) -> PurchaseOrder:
    return await create_purchase_order.execute(
        uow,
        tenant,
        Role.MANAGER,
        create_purchase_order.CreatePurchaseOrderInput(vendor="Feed Co", items=items(*specs)),
    )


def test_build_line_items_assigns_ids_after_existing():
    built = build_line_items(
        [
            LineItemInput(name="Bran", qty=Decimal("1"), unit="bag", price=Decimal("5"), item_id=4),
            LineItemInput(name="Salt", qty=Decimal("2"), unit="kg", price=Decimal("1")),
        ]
    )
    assert [i.item_id for i in built] == [4, 5]


def test_build_line_items_validates():
    with pytest.raises(ValidationError):
        build_line_items([])
    with pytest.raises(ValidationError):
        build_line_items(items(("Bran", "0", "5")))
    with pytest.raises(ValidationError):
        build_line_items(items((" ", "1", "5")))
    with pytest.raises(ValidationError):
        build_line_items(items(("Bran", "1e1000000", "5")))


async def test_create_numbers_orders_and_computes_total():
    repo = StubPurchaseOrders()
    uow = make_uow(repo)
    tenant = uuid4()

    first = await create_order(uow, tenant, ("Bran", "3", "100"), ("Salt", "2", "50"))
    second = await create_order(uow, tenant, ("Wire", "1", "20"))

    assert first.po_number == "PO-000001"
    assert second.po_number == "PO-000002"
    assert first.total_amount == Decimal("400")
    assert first.status is PurchaseOrderStatus.PENDING


async def test_create_denies_worker():
    with pytest.raises(PermissionDenied):
        await create_purchase_order.execute(
            make_uow(StubPurchaseOrders()),
            uuid4(),
            Role.WORKER,
            create_purchase_order.CreatePurchaseOrderInput(
                vendor="X", items=items(("A", "1", "1"))
            ),
        )


async def test_receive_persists_status_and_record():
    repo = StubPurchaseOrders()
    uow = make_uow(repo)
    tenant = uuid4()
    order = await create_order(uow, tenant, ("Bran", "10", "1"), ("Salt", "5", "1"))

    outcome = await receive_purchase_order.execute(
        uow, tenant, Role.MANAGER, order.id, {"1": "10", "2": "0"}
    )

    assert outcome.new_status is PurchaseOrderStatus.PARTIALLY_RECEIVED
    assert repo.orders[order.id].status is PurchaseOrderStatus.PARTIALLY_RECEIVED
    assert repo.receivings == [outcome.record]


async def test_second_partial_session_is_judged_alone_by_default():
    repo = StubPurchaseOrders()
    uow = make_uow(repo)
    tenant = uuid4()
    order = await create_order(uow, tenant, ("Bran", "10", "1"), ("Salt", "5", "1"))

    await receive_purchase_order.execute(uow, tenant, Role.MANAGER, order.id, {"1": "10"})
    outcome = await receive_purchase_order.execute(
        uow, tenant, Role.MANAGER, order.id, {"2": "5"}
    )

    assert outcome.new_status is PurchaseOrderStatus.PARTIALLY_RECEIVED
    assert len(repo.receivings) == 2


async def test_cumulative_receiving_counts_earlier_sessions():
    repo = StubPurchaseOrders()
    uow = make_uow(repo)
    tenant = uuid4()
    order = await create_order(uow, tenant, ("Bran", "10", "1"), ("Salt", "5", "1"))

    await receive_purchase_order.execute(
        uow, tenant, Role.MANAGER, order.id, {"1": "10"}, cumulative=True
    )
    outcome = await receive_purchase_order.execute(
        uow, tenant, Role.MANAGER, order.id, {"2": "5"}, cumulative=True
    )

    assert outcome.new_status is PurchaseOrderStatus.RECEIVED
    assert outcome.record.status is PurchaseOrderStatus.RECEIVED
    assert outcome.record.items[0].received_qty == Decimal("0")


async def test_received_order_is_closed():
    repo = StubPurchaseOrders()
    uow = make_uow(repo)
    tenant = uuid4()
    order = await create_order(uow, tenant, ("Bran", "1", "1"))
    await receive_purchase_order.execute(uow, tenant, Role.MANAGER, order.id, {"1": "1"})

    with pytest.raises(ConflictError):
        await receive_purchase_order.execute(uow, tenant, Role.MANAGER, order.id, {"1": "1"})
    with pytest.raises(ConflictError):
        await update_purchase_order.execute(
            uow,
            tenant,
            Role.MANAGER,
            order.id,
            update_purchase_order.UpdatePurchaseOrderInput(version=2, vendor="Other"),
        )


async def test_update_recomputes_total():
    repo = StubPurchaseOrders()
    uow = make_uow(repo)
    tenant = uuid4()
    order = await create_order(uow, tenant, ("Bran", "1", "100"))

    updated = await update_purchase_order.execute(
        uow,
        tenant,
        Role.ADMIN,
        order.id,
        update_purchase_order.UpdatePurchaseOrderInput(
            version=1, items=items(("Bran", "2", "100"), ("Salt", "4", "25"))
        ),
    )

    assert updated.total_amount == Decimal("300")
    assert updated.version == 2


async def test_edit_never_reuses_a_dropped_item_id():
    repo = StubPurchaseOrders()
    uow = make_uow(repo)
    tenant = uuid4()
    order = await create_order(uow, tenant, ("Bran", "10", "1"), ("Salt", "5", "1"))
    await receive_purchase_order.execute(
        uow, tenant, Role.MANAGER, order.id, {"2": "3"}, cumulative=True
    )

    kept = LineItemInput(name="Bran", qty=Decimal("10"), unit="kg", price=Decimal("1"), item_id=1)
    updated = await update_purchase_order.execute(
        uow,
        tenant,
        Role.ADMIN,
        order.id,
        update_purchase_order.UpdatePurchaseOrderInput(
            version=2, items=[kept, *items(("Lime", "3", "2"))]
        ),
    )
    assert [i.item_id for i in updated.items] == [1, 3]

    # Salt's earlier 3 units must not complete the new Lime line
    outcome = await receive_purchase_order.execute(
        uow, tenant, Role.MANAGER, order.id, {"1": "10"}, cumulative=True
    )
    assert outcome.new_status is PurchaseOrderStatus.PARTIALLY_RECEIVED
