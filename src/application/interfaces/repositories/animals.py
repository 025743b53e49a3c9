from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.animal import Animal
from src.domain.models.medical_record import MedicalRecord


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...
    async def list(self, tenant_id: UUID) -> list[Animal]: ...
    async def get_by_code(self, tenant_id: UUID, animal_code: str) -> Animal | None: ...
    async def list_codes(self, tenant_id: UUID) -> list[str]: ...
    async def delete(self, tenant_id: UUID, animal_id: UUID) -> bool: ...


class MedicalRecordsRepository(Protocol):
    async def add(self, record: MedicalRecord) -> MedicalRecord: ...
    async def list(
        self, tenant_id: UUID, *, animal_code: str | None = None
    ) -> list[MedicalRecord]: ...
    async def delete(self, tenant_id: UUID, record_id: UUID) -> bool: ...
