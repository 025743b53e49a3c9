from __future__ import annotations

from datetime import date
from uuid import UUID

from src.application.errors import PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.farm_production import FarmProduction
from src.domain.services.billing_aggregator import parse_quantity
from src.domain.value_objects.milk import Shift, Species, shift_field
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    day: date,
    species: Species,
    shift: Shift,
    total: object,
) -> FarmProduction:
    if not role.can_record():
        raise PermissionDenied("Role not allowed to record milk")
    production = await uow.farm_production.save_total(
        tenant_id, day, f"{shift_field(species, shift)}_total", parse_quantity(total)
    )
    await uow.commit()
    return production
