from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Note:
    id: UUID
    tenant_id: UUID
    topic: str
    date: date
    description: str = ""
    remarks: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls, *, tenant_id: UUID, topic: str, date: date, description: str = "", remarks: str = ""
    ) -> Note:
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            topic=topic,
            date=date,
            description=description,
            remarks=remarks,
            created_at=datetime.now(timezone.utc),
        )
