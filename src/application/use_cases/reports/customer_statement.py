from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.reports.period import validate_period
from src.domain.models.customer import Customer
from src.domain.services.billing_aggregator import (
    CustomerBillingSummary,
    CustomerDayRow,
    aggregate,
    customer_daily_rows,
    in_date_range,
    summarize_rows,
    with_settlement,
)


@dataclass(slots=True)
class CustomerStatement:
    customer: Customer
    date_from: date
    date_to: date
    rows: list[CustomerDayRow]
    shift_totals: dict[str, Decimal]
    summary: CustomerBillingSummary


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    customer_code: str,
    *,
    date_from: date,
    date_to: date,
    max_days: int = 366,
) -> CustomerStatement:
    validate_period(date_from, date_to, max_days)
    customer = await uow.customers.get_by_code(tenant_id, customer_code)
    if not customer:
        raise NotFound("Customer not found")
    records = in_date_range(
        await uow.shift_records.list(tenant_id, date_from=date_from, date_to=date_to),
        date_from,
        date_to,
    )
    rows = customer_daily_rows(records, customer.customer_code)
    (summary,) = aggregate(records, [customer])
    return CustomerStatement(
        customer=customer,
        date_from=date_from,
        date_to=date_to,
        rows=rows,
        shift_totals=summarize_rows(rows),
        summary=with_settlement(summary, customer.debit_amount),
    )
