from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.purchase_orders import PurchaseOrdersRepository
from src.domain.models.purchase_order import (
    LineItem,
    PurchaseOrder,
    ReceivedLine,
    ReceivingRecord,
)
from src.infrastructure.db.orm.purchase_order import PurchaseOrderORM, ReceivingRecordORM

PO_PREFIX = "PO-"


def _item_to_json(item: LineItem) -> dict:
    return {
        "item_id": item.item_id,
        "name": item.name,
        "qty": str(item.qty),
        "unit": item.unit,
        "price": str(item.price),
    }


def _item_from_json(raw: dict) -> LineItem:
    return LineItem(
        item_id=int(raw["item_id"]),
        name=raw["name"],
        qty=Decimal(raw["qty"]),
        unit=raw.get("unit", ""),
        price=Decimal(raw["price"]),
    )


def _line_to_json(line: ReceivedLine) -> dict:
    return {
        "item_id": line.item_id,
        "name": line.name,
        "qty": str(line.qty),
        "unit": line.unit,
        "price": str(line.price),
        "received_qty": str(line.received_qty),
    }


def _line_from_json(raw: dict) -> ReceivedLine:
    return ReceivedLine(
        item_id=int(raw["item_id"]),
        name=raw["name"],
        qty=Decimal(raw["qty"]),
        unit=raw.get("unit", ""),
        price=Decimal(raw["price"]),
        received_qty=Decimal(raw["received_qty"]),
    )


class PurchaseOrdersSQLAlchemyRepository(PurchaseOrdersRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PurchaseOrderORM) -> PurchaseOrder:
        return PurchaseOrder(
            id=orm.id,
            tenant_id=orm.tenant_id,
            po_number=orm.po_number,
            vendor=orm.vendor,
            items=[_item_from_json(raw) for raw in orm.items or []],
            total_amount=Decimal(orm.total_amount),
            status=orm.status,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    def _record_to_domain(self, orm: ReceivingRecordORM) -> ReceivingRecord:
        return ReceivingRecord(
            id=orm.id,
            tenant_id=orm.tenant_id,
            purchase_order_id=orm.purchase_order_id,
            po_number=orm.po_number,
            vendor=orm.vendor,
            items=tuple(_line_from_json(raw) for raw in orm.items or []),
            received_at=orm.received_at,
            status=orm.status,
        )

    async def add(self, order: PurchaseOrder) -> PurchaseOrder:
        orm = PurchaseOrderORM(
            id=order.id,
            tenant_id=order.tenant_id,
            po_number=order.po_number,
            vendor=order.vendor,
            items=[_item_to_json(i) for i in order.items],
            total_amount=order.total_amount,
            status=order.status,
            created_at=order.created_at,
            updated_at=order.updated_at,
            version=order.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(f"Purchase order {order.po_number} already exists") from exc
        return self._to_domain(orm)

    async def get(self, tenant_id: UUID, order_id: UUID) -> PurchaseOrder | None:
        result = await self.session.execute(
            select(PurchaseOrderORM).where(
                PurchaseOrderORM.tenant_id == tenant_id, PurchaseOrderORM.id == order_id
            )
        )
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, tenant_id: UUID) -> list[PurchaseOrder]:
        stmt = (
            select(PurchaseOrderORM)
            .where(PurchaseOrderORM.tenant_id == tenant_id)
            .order_by(PurchaseOrderORM.created_at.desc(), PurchaseOrderORM.po_number.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def next_po_number(self, tenant_id: UUID) -> str:
        result = await self.session.execute(
            select(PurchaseOrderORM.po_number).where(PurchaseOrderORM.tenant_id == tenant_id)
        )
        highest = 0
        for number in result.scalars().all():
            digits = number.removeprefix(PO_PREFIX)
            if digits.isdigit():
                highest = max(highest, int(digits))
        return f"{PO_PREFIX}{highest + 1:06d}"

    async def update(
        self, tenant_id: UUID, order_id: UUID, data: dict, expected_version: int | None = None
    ) -> PurchaseOrder | None:
        values = dict(data)
        if "items" in values:
            values["items"] = [_item_to_json(i) for i in values["items"]]
        conds = [PurchaseOrderORM.tenant_id == tenant_id, PurchaseOrderORM.id == order_id]
        if expected_version is not None:
            conds.append(PurchaseOrderORM.version == expected_version)
        stmt = (
            update(PurchaseOrderORM)
            .where(*conds)
            .values(**values, version=PurchaseOrderORM.version + 1)
            .returning(PurchaseOrderORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        if orm is None and expected_version is not None:
            if await self.get(tenant_id, order_id) is not None:
                raise ConflictError("Purchase order was modified concurrently")
        return self._to_domain(orm) if orm else None

    async def delete(self, tenant_id: UUID, order_id: UUID) -> bool:
        await self.session.execute(
            delete(ReceivingRecordORM).where(
                ReceivingRecordORM.tenant_id == tenant_id,
                ReceivingRecordORM.purchase_order_id == order_id,
            )
        )
        result = await self.session.execute(
            delete(PurchaseOrderORM).where(
                PurchaseOrderORM.tenant_id == tenant_id, PurchaseOrderORM.id == order_id
            )
        )
        return result.rowcount > 0

    async def add_receiving(self, record: ReceivingRecord) -> ReceivingRecord:
        orm = ReceivingRecordORM(
            id=record.id,
            tenant_id=record.tenant_id,
            purchase_order_id=record.purchase_order_id,
            po_number=record.po_number,
            vendor=record.vendor,
            items=[_line_to_json(line) for line in record.items],
            received_at=record.received_at,
            status=record.status,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._record_to_domain(orm)

    async def list_receivings(self, tenant_id: UUID, order_id: UUID) -> list[ReceivingRecord]:
        stmt = (
            select(ReceivingRecordORM)
            .where(
                ReceivingRecordORM.tenant_id == tenant_id,
                ReceivingRecordORM.purchase_order_id == order_id,
            )
            .order_by(ReceivingRecordORM.received_at)
        )
        result = await self.session.execute(stmt)
        return [self._record_to_domain(r) for r in result.scalars().all()]
