from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

from src.domain.value_objects.milk import Shift, Species, shift_field


@dataclass(slots=True)
class FarmProduction:
    """Whole-farm liters per shift for one day, entered independently of customers."""

    tenant_id: UUID
    date: date
    cow_morning_total: Decimal = Decimal("0")
    cow_evening_total: Decimal = Decimal("0")
    buffalo_morning_total: Decimal = Decimal("0")
    buffalo_evening_total: Decimal = Decimal("0")
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def cow_total(self) -> Decimal:
        return self.cow_morning_total + self.cow_evening_total

    @property
    def buffalo_total(self) -> Decimal:
        return self.buffalo_morning_total + self.buffalo_evening_total

    @property
    def total(self) -> Decimal:
        return self.cow_total + self.buffalo_total

    def set_total(self, species: Species, shift: Shift, value: Decimal) -> None:
        setattr(self, f"{shift_field(species, shift)}_total", value)
        self.updated_at = datetime.now(timezone.utc)
