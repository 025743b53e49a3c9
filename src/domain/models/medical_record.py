from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True)
class MedicalRecord:
    id: UUID
    tenant_id: UUID
    animal_code: str
    animal_type: str  # snapshot of the animal's type when the record was written
    diagnosis: str
    treatment: str
    date: date
    cost: Decimal = Decimal("0")
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        tenant_id: UUID,
        animal_code: str,
        animal_type: str,
        diagnosis: str,
        treatment: str,
        date: date,
        cost: Decimal = Decimal("0"),
        notes: str | None = None,
    ) -> MedicalRecord:
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            animal_code=animal_code,
            animal_type=animal_type,
            diagnosis=diagnosis,
            treatment=treatment,
            date=date,
            cost=cost,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )
