from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID


@dataclass(slots=True)
class FarmProfile:
    tenant_id: UUID
    farm_name: str = ""
    city: str = ""
    country: str = ""
    contact: str = ""
    email: str | None = None
    passkey_hash: str | None = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def has_details(self) -> bool:
        return bool(self.farm_name)
