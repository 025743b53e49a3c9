from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.purchase_order import PurchaseOrderStatus


class LineItemSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    item_id: int | None = None
    name: str
    qty: Decimal
    unit: str = ""
    price: Decimal


class PurchaseOrderCreate(BaseModel):
    vendor: str = Field(min_length=1)
    items: list[LineItemSchema] = Field(min_length=1)


class PurchaseOrderUpdate(BaseModel):
    version: int
    vendor: str | None = None
    items: list[LineItemSchema] | None = None


class ReceiveRequest(BaseModel):
    # item id -> quantity delivered in this session; unreadable values count as 0
    received_quantities: dict[str, str | int | float | None]


class PurchaseOrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    po_number: str
    vendor: str
    items: list[LineItemSchema]
    total_amount: Decimal
    status: PurchaseOrderStatus
    version: int
    created_at: datetime
    updated_at: datetime


class ReceivedLineSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    item_id: int
    name: str
    qty: Decimal
    unit: str
    price: Decimal
    received_qty: Decimal


class ReceivingRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    purchase_order_id: UUID
    po_number: str
    vendor: str
    items: list[ReceivedLineSchema]
    received_at: datetime
    status: PurchaseOrderStatus


class ReceiveResponse(BaseModel):
    status: PurchaseOrderStatus
    record: ReceivingRecordResponse
