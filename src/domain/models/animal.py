from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

FIRST_ANIMAL_CODE = 1001


class AnimalType(str, Enum):
    COW = "Cow"
    BUFFALO = "Buffalo"
    CALF = "Calf"


class CalfSubtype(str, Enum):
    COW = "Cow"
    BUFFALO = "Buffalo"


@dataclass(slots=True)
class Animal:
    id: UUID
    tenant_id: UUID
    animal_code: str  # 4-digit herd number, e.g. "1001"
    animal_type: AnimalType
    entry_date: date
    subtype: CalfSubtype | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        tenant_id: UUID,
        animal_code: str,
        animal_type: AnimalType,
        entry_date: date,
        subtype: CalfSubtype | None = None,
    ) -> Animal:
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            animal_code=animal_code,
            animal_type=AnimalType(animal_type),
            entry_date=entry_date,
            subtype=CalfSubtype(subtype) if subtype is not None else None,
            created_at=datetime.now(timezone.utc),
        )


def next_animal_code(existing_codes: list[str]) -> str:
    """Next herd number after the highest numeric code in use (starts at 1001)."""
    highest = FIRST_ANIMAL_CODE - 1
    for code in existing_codes:
        if code.isdigit():
            highest = max(highest, int(code))
    return str(highest + 1)
