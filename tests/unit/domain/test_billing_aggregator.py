from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from src.domain.models.customer import Customer
from src.domain.models.daily_shift_record import DailyShiftRecord
from src.domain.services.billing_aggregator import (
    aggregate,
    customer_daily_rows,
    customer_sort_key,
    in_date_range,
    parse_quantity,
    settle,
    summarize_rows,
    with_settlement,
)

TENANT = uuid4()


def make_customer(code: str, *, cow_rate=None, buffalo_rate=None, debit="0") -> Customer:
    return Customer.create(
        tenant_id=TENANT,
        customer_code=code,
        name=f"Customer {code}",
        cow_rate=Decimal(cow_rate) if cow_rate is not None else None,
        buffalo_rate=Decimal(buffalo_rate) if buffalo_rate is not None else None,
        debit_amount=Decimal(debit),
    )


def make_record(day: str, **shifts) -> DailyShiftRecord:
    return DailyShiftRecord(tenant_id=TENANT, date=date.fromisoformat(day), **shifts)


def by_code(summaries):
    return {s.customer_code: s for s in summaries}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.5", Decimal("12.5")),
        (7, Decimal("7")),
        (" 3 ", Decimal("3")),
        ("", Decimal("0")),
        (None, Decimal("0")),
        ("abc", Decimal("0")),
        ("-4", Decimal("0")),
        ("NaN", Decimal("0")),
        ("Infinity", Decimal("0")),
        (True, Decimal("0")),
        ("10L", Decimal("10")),
        ("12,5", Decimal("12")),
        ("5 liters", Decimal("5")),
        (".5", Decimal("0.5")),
        ("1e1000000", Decimal("0")),
        ("1e999999", Decimal("0")),
        (Decimal("1E+500"), Decimal("0")),
    ],
)
def test_parse_quantity_never_raises(raw, expected):
    assert parse_quantity(raw) == expected


def test_huge_typed_quantity_does_not_break_the_bill():
    customer = make_customer("1", cow_rate="50", buffalo_rate="60")
    records = [
        make_record("2024-03-01", cow_morning={"1": "1e1000000"}, buffalo_evening={"1": "4"}),
        make_record("2024-03-02", cow_morning={"1": "1e999999"}, cow_evening={"1": "10L"}),
    ]

    (summary,) = aggregate(records, [customer])

    assert summary.cow_total == Decimal("10")
    assert summary.buffalo_total == Decimal("4")
    assert summary.amount == Decimal("740")


def test_rates_debit_and_settlement():
    customer = make_customer("1", cow_rate="50", buffalo_rate="60", debit="100")
    records = [
        make_record("2024-03-01", cow_morning={"1": "12"}, buffalo_evening={"1": "4"}),
        make_record("2024-03-02", cow_evening={"1": "8"}, buffalo_morning={"1": "6"}),
    ]
    (summary,) = aggregate(records, [customer])

    assert summary.cow_total == Decimal("20")
    assert summary.buffalo_total == Decimal("10")
    assert summary.amount == Decimal("1600")
    assert settle(summary, customer.debit_amount) == Decimal("1500")


def test_settlement_is_not_clamped():
    customer = make_customer("1", cow_rate="50", buffalo_rate="60")
    records = [make_record("2024-03-01", cow_morning={"1": "20"}, buffalo_morning={"1": "10"})]
    (summary,) = aggregate(records, [customer])

    assert settle(summary, Decimal("2000")) == Decimal("-400")


def test_settlement_moves_one_for_one_with_debit():
    customer = make_customer("1", cow_rate="45.5")
    (summary,) = aggregate([make_record("2024-03-01", cow_morning={"1": "3"})], [customer])

    assert settle(summary, 10) - settle(summary, 35) == Decimal("25")


def test_missing_rate_prices_liters_at_zero():
    customer = make_customer("9")
    records = [make_record("2024-03-01", cow_morning={"9": "30"}, buffalo_evening={"9": "5"})]
    (summary,) = aggregate(records, [customer])

    assert summary.total == Decimal("35")
    assert summary.amount == Decimal("0")


def test_total_equals_sum_of_shifts_and_of_species():
    customer = make_customer("2", cow_rate="1", buffalo_rate="1")
    records = [
        make_record(
            "2024-03-01",
            cow_morning={"2": "1.25"},
            cow_evening={"2": "2"},
            buffalo_morning={"2": "3"},
            buffalo_evening={"2": "bad"},
        )
    ]
    (s,) = aggregate(records, [customer])

    shifts = s.cow_morning + s.cow_evening + s.buffalo_morning + s.buffalo_evening
    assert s.total == shifts == s.cow_total + s.buffalo_total == Decimal("6.25")


def test_liters_are_conserved_across_known_customers():
    customers = [make_customer(code) for code in ("1", "2", "3")]
    records = [
        make_record("2024-03-01", cow_morning={"1": "5", "2": "7"}, buffalo_evening={"3": "2.5"}),
        make_record("2024-03-02", cow_evening={"1": "1", "3": "4"}, buffalo_morning={"2": "3"}),
    ]
    entered = sum(
        (parse_quantity(v) for r in records for m in r.mappings().values() for v in m.values()),
        Decimal("0"),
    )

    assert sum((s.total for s in aggregate(records, customers)), Decimal("0")) == entered


def test_unknown_customers_are_dropped_and_idle_customers_kept():
    customers = [make_customer("1"), make_customer("2")]
    records = [make_record("2024-03-01", cow_morning={"1": "5", "77": "100"})]
    summaries = by_code(aggregate(records, customers))

    assert set(summaries) == {"1", "2"}
    assert summaries["1"].total == Decimal("5")
    assert summaries["2"].total == Decimal("0")


def test_with_settlement_defaults_missing_debit_to_zero():
    customer = make_customer("1", cow_rate="10")
    (summary,) = aggregate([make_record("2024-03-01", cow_morning={"1": "2"})], [customer])
    with_settlement(summary, None)

    assert summary.debit_amount == Decimal("0")
    assert summary.final_amount == Decimal("20")


def test_customer_sort_key_orders_numerically():
    codes = ["10", "2", "x1", "1"]
    assert sorted(codes, key=customer_sort_key) == ["1", "2", "10", "x1"]


def test_in_date_range_is_inclusive():
    records = [make_record(day) for day in ("2024-02-29", "2024-03-01", "2024-03-31", "2024-04-01")]
    kept = in_date_range(records, date(2024, 3, 1), "2024-03-31")

    assert [r.date.isoformat() for r in kept] == ["2024-03-01", "2024-03-31"]


def test_customer_daily_rows_newest_first_without_empty_days():
    records = [
        make_record("2024-03-01", cow_morning={"5": "2"}),
        make_record("2024-03-02", cow_morning={"6": "9"}),
        make_record("2024-03-03", buffalo_evening={"5": "1.5"}),
    ]
    rows = customer_daily_rows(records, "5")

    assert [r.date.isoformat() for r in rows] == ["2024-03-03", "2024-03-01"]
    totals = summarize_rows(rows)
    assert totals["cow_morning"] == Decimal("2")
    assert totals["buffalo_evening"] == Decimal("1.5")
