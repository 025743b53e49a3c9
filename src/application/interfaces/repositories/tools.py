from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.consumption import ConsumptionItem
from src.domain.models.note import Note


class NotesRepository(Protocol):
    async def add(self, note: Note) -> Note: ...
    async def list(self, tenant_id: UUID) -> list[Note]: ...
    async def delete(self, tenant_id: UUID, note_id: UUID) -> bool: ...


class ConsumptionRepository(Protocol):
    async def add(self, item: ConsumptionItem) -> ConsumptionItem: ...
    async def list(self, tenant_id: UUID) -> list[ConsumptionItem]: ...
    async def delete(self, tenant_id: UUID, item_id: UUID) -> bool: ...
