from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DECIMAL, Date, DateTime, Enum, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.models.animal import AnimalType, CalfSubtype
from src.infrastructure.db.base import Base


class AnimalORM(Base):
    __tablename__ = "animals"
    __table_args__ = (UniqueConstraint("tenant_id", "animal_code", name="ux_animals_tenant_code"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), index=True, nullable=False)
    animal_code: Mapped[str] = mapped_column(String(16), nullable=False)
    animal_type: Mapped[AnimalType] = mapped_column(
        Enum(AnimalType, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    subtype: Mapped[CalfSubtype | None] = mapped_column(
        Enum(CalfSubtype, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=True,
    )
    entry_date: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class MedicalRecordORM(Base):
    __tablename__ = "medical_records"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), index=True, nullable=False)
    animal_code: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    animal_type: Mapped[str] = mapped_column(String(32), nullable=False)
    diagnosis: Mapped[str] = mapped_column(String(512), nullable=False)
    treatment: Mapped[str] = mapped_column(String(1024), nullable=False)
    date: Mapped[date] = mapped_column(Date, nullable=False)
    cost: Mapped[Decimal] = mapped_column(DECIMAL(12, 2), nullable=False, default=0)
    notes: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
