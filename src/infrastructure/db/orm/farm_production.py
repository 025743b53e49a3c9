from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DECIMAL, Date, DateTime, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class FarmProductionORM(Base):
    __tablename__ = "farm_production"

    tenant_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    date: Mapped[date] = mapped_column(Date, primary_key=True)
    cow_morning_total: Mapped[Decimal] = mapped_column(DECIMAL(12, 3), nullable=False, default=0)
    cow_evening_total: Mapped[Decimal] = mapped_column(DECIMAL(12, 3), nullable=False, default=0)
    buffalo_morning_total: Mapped[Decimal] = mapped_column(
        DECIMAL(12, 3), nullable=False, default=0
    )
    buffalo_evening_total: Mapped[Decimal] = mapped_column(
        DECIMAL(12, 3), nullable=False, default=0
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
