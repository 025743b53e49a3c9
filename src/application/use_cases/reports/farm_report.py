from __future__ import annotations

from datetime import date
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.reports.period import validate_period
from src.domain.services.farm_summary import FarmSummary, summarize_farm


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    *,
    date_from: date,
    date_to: date,
    max_days: int = 366,
) -> FarmSummary:
    validate_period(date_from, date_to, max_days)
    production = await uow.farm_production.list(tenant_id, date_from=date_from, date_to=date_to)
    cash_entries = await uow.cash_entries.list(tenant_id, date_from=date_from, date_to=date_to)
    expenses = await uow.expenses.list(tenant_id, date_from=date_from, date_to=date_to)
    return summarize_farm(production, cash_entries, expenses)
