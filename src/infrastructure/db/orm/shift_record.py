from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import JSON, Date, DateTime, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class ShiftRecordORM(Base):
    __tablename__ = "daily_shift_records"

    tenant_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    date: Mapped[date] = mapped_column(Date, primary_key=True)
    # customer code -> quantity as typed
    cow_morning: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    cow_evening: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    buffalo_morning: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    buffalo_evening: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
