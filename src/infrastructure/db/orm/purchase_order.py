from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import JSON, DECIMAL, DateTime, Enum, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.models.purchase_order import PurchaseOrderStatus
from src.infrastructure.db.base import Base


def _status_enum() -> Enum:
    return Enum(
        PurchaseOrderStatus,
        native_enum=False,
        length=32,
        values_callable=lambda e: [m.value for m in e],
    )


class PurchaseOrderORM(Base):
    __tablename__ = "purchase_orders"
    __table_args__ = (
        UniqueConstraint("tenant_id", "po_number", name="ux_purchase_orders_tenant_number"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), index=True, nullable=False)
    po_number: Mapped[str] = mapped_column(String(32), nullable=False)
    vendor: Mapped[str] = mapped_column(String(255), nullable=False)
    # list of {item_id, name, qty, unit, price}; decimals stored as strings
    items: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    total_amount: Mapped[Decimal] = mapped_column(DECIMAL(14, 2), nullable=False)
    status: Mapped[PurchaseOrderStatus] = mapped_column(_status_enum(), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(nullable=False, default=1)


class ReceivingRecordORM(Base):
    __tablename__ = "receiving_records"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), index=True, nullable=False)
    purchase_order_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), index=True, nullable=False
    )
    po_number: Mapped[str] = mapped_column(String(32), nullable=False)
    vendor: Mapped[str] = mapped_column(String(255), nullable=False)
    items: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    received_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[PurchaseOrderStatus] = mapped_column(_status_enum(), nullable=False)
