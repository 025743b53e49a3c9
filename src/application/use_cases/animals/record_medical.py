from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.medical_record import MedicalRecord
from src.domain.services.billing_aggregator import parse_quantity
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class RecordMedicalInput:
    animal_code: str
    diagnosis: str
    treatment: str
    date: date
    cost: object = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, tenant_id: UUID, role: Role, payload: RecordMedicalInput
) -> MedicalRecord:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to write medical records")
    if not payload.diagnosis.strip() or not payload.treatment.strip():
        raise ValidationError("Diagnosis and treatment are required")
    animal = await uow.animals.get_by_code(tenant_id, payload.animal_code.strip())
    if not animal:
        raise NotFound(f"Animal {payload.animal_code} not found")
    record = MedicalRecord.create(
        tenant_id=tenant_id,
        animal_code=animal.animal_code,
        animal_type=animal.animal_type.value,
        diagnosis=payload.diagnosis.strip(),
        treatment=payload.treatment.strip(),
        date=payload.date,
        # Cost is a free-text field on the form; anything unreadable is free
        cost=parse_quantity(payload.cost),
        notes=payload.notes,
    )
    created = await uow.medical_records.add(record)
    await uow.commit()
    return created
