from __future__ import annotations

from datetime import date
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import ValidationError
from src.application.use_cases.milk import save_shift_entry
from src.domain.models.daily_shift_record import DailyShiftRecord
from src.domain.value_objects.milk import Shift, Species
from src.domain.value_objects.role import Role


class StubShiftRecords:
    def __init__(self) -> None:
        self.records: dict[date, DailyShiftRecord] = {}

    async def save_shift(self, tenant_id, day, field_name, quantities):
        record = self.records.setdefault(day, DailyShiftRecord(tenant_id=tenant_id, date=day))
        setattr(record, field_name, dict(quantities))
        return record


def make_uow(repo):
    async def commit():
        return None

    return SimpleNamespace(shift_records=repo, commit=commit)


def test_clean_quantities_drops_blank_values():
    cleaned = save_shift_entry.clean_quantities({1: " 4.5 ", "2": "", "3": None, "4": 0})
    assert cleaned == {"1": "4.5", "4": "0"}


def test_clean_quantities_rejects_blank_code():
    with pytest.raises(ValidationError):
        save_shift_entry.clean_quantities({" ": "3"})


async def test_saving_one_shift_keeps_the_others():
    repo = StubShiftRecords()
    uow = make_uow(repo)
    tenant = uuid4()
    day = date(2024, 3, 1)

    await save_shift_entry.execute(
        uow, tenant, Role.WORKER, day, Species.COW, Shift.MORNING, {"1": "5"}
    )
    record = await save_shift_entry.execute(
        uow, tenant, Role.WORKER, day, Species.BUFFALO, Shift.EVENING, {"1": "2"}
    )

    assert record.cow_morning == {"1": "5"}
    assert record.buffalo_evening == {"1": "2"}
    assert record.cow_evening == {}


async def test_resaving_a_shift_replaces_it_wholesale():
    repo = StubShiftRecords()
    uow = make_uow(repo)
    tenant = uuid4()
    day = date(2024, 3, 1)

    await save_shift_entry.execute(
        uow, tenant, Role.ADMIN, day, Species.COW, Shift.MORNING, {"1": "5", "2": "6"}
    )
    record = await save_shift_entry.execute(
        uow, tenant, Role.ADMIN, day, Species.COW, Shift.MORNING, {"2": "7"}
    )

    assert record.cow_morning == {"2": "7"}
