from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import NotFound, ValidationError
from src.application.use_cases.reports import customer_billing_report, customer_statement
from src.domain.models.customer import Customer
from src.domain.models.daily_shift_record import DailyShiftRecord

TENANT = uuid4()


class StubCustomers:
    def __init__(self, customers):
        self.customers = customers

    async def list(self, tenant_id):
        return list(self.customers)

    async def get_by_code(self, tenant_id, code):
        return next((c for c in self.customers if c.customer_code == code), None)


class StubShiftRecords:
    def __init__(self, records):
        self.records = records

    async def list(self, tenant_id, *, date_from, date_to):
        return list(self.records)


def make_uow(customers, records):
    return SimpleNamespace(
        customers=StubCustomers(customers), shift_records=StubShiftRecords(records)
    )


def customer(code, *, cow_rate="0", debit="0"):
    return Customer.create(
        tenant_id=TENANT,
        customer_code=code,
        name=f"C{code}",
        cow_rate=Decimal(cow_rate),
        debit_amount=Decimal(debit),
    )


def record(day, **shifts):
    return DailyShiftRecord(tenant_id=TENANT, date=date.fromisoformat(day), **shifts)


async def test_billing_report_hides_idle_customers_and_sorts_by_code():
    customers = [customer("10", cow_rate="2"), customer("2", cow_rate="3"), customer("5")]
    records = [
        record("2024-03-01", cow_morning={"10": "4", "2": "1"}),
        # outside the period; the repository may over-fetch
        record("2024-04-01", cow_morning={"5": "9"}),
    ]
    report = await customer_billing_report.execute(
        make_uow(customers, records),
        TENANT,
        date_from=date(2024, 3, 1),
        date_to=date(2024, 3, 31),
    )

    assert [row.customer_code for row in report.rows] == ["2", "10"]
    assert report.totals["total"] == Decimal("5")
    assert report.totals["amount"] == Decimal("11")


async def test_billing_report_settles_each_customer():
    customers = [customer("1", cow_rate="50", debit="2000")]
    records = [record("2024-03-01", cow_morning={"1": "20"})]
    report = await customer_billing_report.execute(
        make_uow(customers, records), TENANT, date_from=date(2024, 3, 1), date_to=date(2024, 3, 31)
    )

    (row,) = report.rows
    assert row.debit_amount == Decimal("2000")
    assert row.final_amount == Decimal("-1000")


async def test_billing_report_can_include_idle_customers():
    report = await customer_billing_report.execute(
        make_uow([customer("1")], []),
        TENANT,
        date_from=date(2024, 3, 1),
        date_to=date(2024, 3, 31),
        include_inactive=True,
    )
    assert [row.customer_code for row in report.rows] == ["1"]


async def test_billing_report_rejects_reversed_period():
    with pytest.raises(ValidationError):
        await customer_billing_report.execute(
            make_uow([], []), TENANT, date_from=date(2024, 3, 2), date_to=date(2024, 3, 1)
        )


async def test_billing_report_rejects_overlong_period():
    with pytest.raises(ValidationError):
        await customer_billing_report.execute(
            make_uow([], []),
            TENANT,
            date_from=date(2023, 1, 1),
            date_to=date(2024, 12, 31),
            max_days=366,
        )


async def test_statement_for_unknown_customer():
    with pytest.raises(NotFound):
        await customer_statement.execute(
            make_uow([], []), TENANT, "9", date_from=date(2024, 3, 1), date_to=date(2024, 3, 2)
        )


async def test_statement_rows_and_summary():
    customers = [customer("3", cow_rate="100", debit="50")]
    records = [
        record("2024-03-01", cow_morning={"3": "1"}),
        record("2024-03-02", cow_evening={"3": "2"}),
        record("2024-03-03", cow_evening={"4": "2"}),
    ]
    statement = await customer_statement.execute(
        make_uow(customers, records),
        TENANT,
        "3",
        date_from=date(2024, 3, 1),
        date_to=date(2024, 3, 31),
    )

    assert [r.date for r in statement.rows] == [date(2024, 3, 2), date(2024, 3, 1)]
    assert statement.shift_totals["cow_evening"] == Decimal("2")
    assert statement.summary.amount == Decimal("300")
    assert statement.summary.final_amount == Decimal("250")
