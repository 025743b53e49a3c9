from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal, AnimalType, CalfSubtype, next_animal_code
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class RegisterAnimalInput:
    animal_type: AnimalType
    entry_date: date
    subtype: CalfSubtype | None = None


async def execute(
    uow: UnitOfWork, tenant_id: UUID, role: Role, payload: RegisterAnimalInput
) -> Animal:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to register animals")
    if payload.animal_type is AnimalType.CALF and payload.subtype is None:
        raise ValidationError("Calves need a subtype (Cow or Buffalo)")
    if payload.animal_type is not AnimalType.CALF and payload.subtype is not None:
        raise ValidationError("Only calves carry a subtype")
    code = next_animal_code(await uow.animals.list_codes(tenant_id))
    animal = Animal.create(
        tenant_id=tenant_id,
        animal_code=code,
        animal_type=payload.animal_type,
        entry_date=payload.entry_date,
        subtype=payload.subtype,
    )
    created = await uow.animals.add(animal)
    await uow.commit()
    return created
