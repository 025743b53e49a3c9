from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class CashEntryType(str, Enum):
    CREDIT = "Credit"  # cash in
    DEBIT = "Debit"  # cash out


@dataclass(slots=True)
class CashEntry:
    id: UUID
    tenant_id: UUID
    date: date
    description: str
    amount: Decimal
    entry_type: CashEntryType
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        tenant_id: UUID,
        date: date,
        description: str,
        amount: Decimal,
        entry_type: CashEntryType,
    ) -> CashEntry:
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            date=date,
            description=description,
            amount=amount,
            entry_type=CashEntryType(entry_type),
            created_at=datetime.now(timezone.utc),
        )
