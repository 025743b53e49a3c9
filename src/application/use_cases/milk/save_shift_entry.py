from __future__ import annotations

from datetime import date
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.daily_shift_record import DailyShiftRecord
from src.domain.value_objects.milk import Shift, Species, shift_field
from src.domain.value_objects.role import Role


def clean_quantities(quantities: dict[str, object]) -> dict[str, str]:
    """Normalize a submitted sheet: string keys and values, blank entries dropped.

    Values are stored as typed; unreadable numbers are tolerated here and
    count as zero when billed.
    """
    cleaned: dict[str, str] = {}
    for code, raw in quantities.items():
        key = str(code).strip()
        if not key:
            raise ValidationError("Customer code cannot be blank")
        if raw is None:
            continue
        value = str(raw).strip()
        if value:
            cleaned[key] = value
    return cleaned


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    day: date,
    species: Species,
    shift: Shift,
    quantities: dict[str, object],
) -> DailyShiftRecord:
    """Replace one species/shift sheet for ``day``; the other three are left alone."""
    if not role.can_record():
        raise PermissionDenied("Role not allowed to record milk")
    record = await uow.shift_records.save_shift(
        tenant_id, day, shift_field(species, shift), clean_quantities(quantities)
    )
    await uow.commit()
    return record
