from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True)
class Customer:
    id: UUID
    tenant_id: UUID
    customer_code: str  # account number shown on bills, digits only
    name: str
    phone: str | None = None
    cow_rate: Decimal | None = None
    buffalo_rate: Decimal | None = None
    debit_amount: Decimal = Decimal("0")
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        *,
        tenant_id: UUID,
        customer_code: str,
        name: str,
        phone: str | None = None,
        cow_rate: Decimal | None = None,
        buffalo_rate: Decimal | None = None,
        debit_amount: Decimal | None = None,
    ) -> Customer:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            customer_code=customer_code.strip(),
            name=name,
            phone=phone,
            cow_rate=cow_rate,
            buffalo_rate=buffalo_rate,
            debit_amount=debit_amount if debit_amount is not None else Decimal("0"),
            created_at=now,
            updated_at=now,
            version=1,
        )
