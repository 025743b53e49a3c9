from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True)
class ConsumptionItem:
    id: UUID
    tenant_id: UUID
    name: str
    qty: Decimal
    unit: str
    date: date
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        tenant_id: UUID,
        name: str,
        qty: Decimal,
        unit: str,
        date: date,
        notes: str | None = None,
    ) -> ConsumptionItem:
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            name=name,
            qty=qty,
            unit=unit,
            date=date,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )
