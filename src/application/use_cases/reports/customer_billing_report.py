from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.reports.period import validate_period
from src.domain.services.billing_aggregator import (
    ZERO,
    CustomerBillingSummary,
    aggregate,
    customer_sort_key,
    in_date_range,
    with_settlement,
)

_TOTAL_FIELDS = (
    "cow_morning",
    "cow_evening",
    "buffalo_morning",
    "buffalo_evening",
    "cow_total",
    "buffalo_total",
    "total",
    "amount",
    "debit_amount",
    "final_amount",
)


@dataclass(slots=True)
class CustomerBillingReport:
    date_from: date
    date_to: date
    rows: list[CustomerBillingSummary]
    totals: dict[str, Decimal] = field(default_factory=dict)


def grand_totals(rows: list[CustomerBillingSummary]) -> dict[str, Decimal]:
    totals = {name: ZERO for name in _TOTAL_FIELDS}
    for row in rows:
        for name in _TOTAL_FIELDS:
            totals[name] += getattr(row, name) or ZERO
    return totals


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    *,
    date_from: date,
    date_to: date,
    max_days: int = 366,
    include_inactive: bool = False,
) -> CustomerBillingReport:
    """Billing for every customer with milk in the period, in account order."""
    validate_period(date_from, date_to, max_days)
    records = await uow.shift_records.list(tenant_id, date_from=date_from, date_to=date_to)
    customers = await uow.customers.list(tenant_id)
    debits = {c.customer_code: c.debit_amount for c in customers}

    summaries = aggregate(in_date_range(records, date_from, date_to), customers)
    if not include_inactive:
        summaries = [s for s in summaries if s.total > 0]
    summaries.sort(key=lambda s: customer_sort_key(s.customer_code))
    rows = [with_settlement(s, debits.get(s.customer_code)) for s in summaries]
    return CustomerBillingReport(
        date_from=date_from, date_to=date_to, rows=rows, totals=grand_totals(rows)
    )
