from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class ExpenseCategory(str, Enum):
    FEED = "Feed"
    MEDICAL = "Medical"
    MAINTENANCE = "Maintenance"
    SALARY = "Salary"
    MISC = "Misc"


@dataclass(slots=True)
class Expense:
    id: UUID
    tenant_id: UUID
    date: date
    item: str
    amount: Decimal
    category: ExpenseCategory = ExpenseCategory.FEED
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        tenant_id: UUID,
        date: date,
        item: str,
        amount: Decimal,
        category: ExpenseCategory = ExpenseCategory.FEED,
        notes: str | None = None,
    ) -> Expense:
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            date=date,
            item=item,
            amount=amount,
            category=ExpenseCategory(category),
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )
