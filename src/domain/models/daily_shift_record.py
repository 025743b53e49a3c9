from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID

from src.domain.value_objects.milk import SHIFT_FIELDS, Shift, Species, shift_field


@dataclass(slots=True)
class DailyShiftRecord:
    """Per-customer quantities collected on one farm day.

    Each shift mapping goes from customer code to the quantity typed by the
    operator. Values are kept as entered (usually strings) and parsed only when
    aggregated, so a bad entry never blocks saving the rest of the sheet.
    """

    tenant_id: UUID
    date: date
    cow_morning: dict[str, str] = field(default_factory=dict)
    cow_evening: dict[str, str] = field(default_factory=dict)
    buffalo_morning: dict[str, str] = field(default_factory=dict)
    buffalo_evening: dict[str, str] = field(default_factory=dict)
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def shift(self, species: Species, shift: Shift) -> dict[str, str]:
        return getattr(self, shift_field(species, shift))

    def replace_shift(self, species: Species, shift: Shift, quantities: dict[str, str]) -> None:
        setattr(self, shift_field(species, shift), dict(quantities))
        self.updated_at = datetime.now(timezone.utc)

    def mappings(self) -> dict[str, dict[str, str]]:
        return {name: getattr(self, name) for name in SHIFT_FIELDS}
