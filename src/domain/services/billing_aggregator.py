"""Customer milk billing over a date range.

Folds the per-day shift sheets into one running summary per customer, then
prices the cow and buffalo liters with that customer's current rates. The
fold never fails: quantities that cannot be read count as zero and entries
for customers that no longer exist are skipped.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation

from src.domain.models.customer import Customer
from src.domain.models.daily_shift_record import DailyShiftRecord
from src.domain.value_objects.milk import Shift, Species, shift_field

ZERO = Decimal("0")
# Exponents past +-12 are typos; large ones would overflow once priced
MAX_ADJUSTED_EXPONENT = 12

_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_quantity(value: object) -> Decimal:
    """Read an operator-entered quantity as a non-negative Decimal (bad input -> 0).

    Like the entry forms, only the leading number counts: ``"10L"`` is 10 and
    ``"12,5"`` is 12. Negative, non-finite and absurdly large values read as 0.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        parsed = value
    else:
        match = _LEADING_NUMBER.match(str(value))
        if not match:
            return ZERO
        try:
            parsed = Decimal(match.group().strip())
        except (InvalidOperation, ValueError):
            return ZERO
    if not parsed.is_finite() or parsed < 0:
        return ZERO
    if parsed and abs(parsed.adjusted()) > MAX_ADJUSTED_EXPONENT:
        return ZERO
    return parsed


def customer_sort_key(customer_code: str) -> tuple[int, int, str]:
    """Numeric account order; non-numeric codes go last, alphabetically."""
    code = customer_code.strip()
    if code.isdigit():
        return (0, int(code), code)
    return (1, 0, code)


@dataclass(slots=True)
class CustomerBillingSummary:
    customer_code: str
    name: str
    cow_morning: Decimal = ZERO
    cow_evening: Decimal = ZERO
    buffalo_morning: Decimal = ZERO
    buffalo_evening: Decimal = ZERO
    cow_total: Decimal = ZERO
    buffalo_total: Decimal = ZERO
    total: Decimal = ZERO
    amount: Decimal = ZERO
    # Only filled in for statement/report views
    debit_amount: Decimal | None = None
    final_amount: Decimal | None = None

    def add(self, species: Species, shift: Shift, quantity: Decimal) -> None:
        name = shift_field(species, shift)
        setattr(self, name, getattr(self, name) + quantity)
        if species is Species.COW:
            self.cow_total += quantity
        else:
            self.buffalo_total += quantity
        self.total += quantity


@dataclass(slots=True, frozen=True)
class CustomerDayRow:
    date: date
    cow_morning: Decimal
    cow_evening: Decimal
    buffalo_morning: Decimal
    buffalo_evening: Decimal

    @property
    def total(self) -> Decimal:
        return self.cow_morning + self.cow_evening + self.buffalo_morning + self.buffalo_evening


def billing_amount(summary: CustomerBillingSummary, customer: Customer) -> Decimal:
    # An unset (or zero) rate prices that species at nothing
    cow_amount = summary.cow_total * customer.cow_rate if customer.cow_rate else ZERO
    buffalo_amount = (
        summary.buffalo_total * customer.buffalo_rate if customer.buffalo_rate else ZERO
    )
    return cow_amount + buffalo_amount


def aggregate(
    records: Iterable[DailyShiftRecord], customers: Iterable[Customer]
) -> list[CustomerBillingSummary]:
    """Summarize every known customer over ``records``.

    ``records`` must already be restricted to the wanted date range. One
    summary is returned per customer, including customers with no milk in the
    range; hiding those is up to the caller. Order is not significant.
    """
    known: dict[str, Customer] = {c.customer_code: c for c in customers}
    summaries = {
        code: CustomerBillingSummary(customer_code=code, name=customer.name)
        for code, customer in known.items()
    }
    for record in records:
        for species in Species:
            for shift in Shift:
                entries = record.shift(species, shift) or {}
                for code, raw in entries.items():
                    summary = summaries.get(str(code))
                    if summary is None:
                        # Sheet still references a deleted customer
                        continue
                    summary.add(species, shift, parse_quantity(raw))
    for code, summary in summaries.items():
        summary.amount = billing_amount(summary, known[code])
    return list(summaries.values())


def settle(summary: CustomerBillingSummary, debit_amount: Decimal | int | str) -> Decimal:
    """Payable amount after the standing debit. Negative means the farm owes the customer."""
    return summary.amount - Decimal(str(debit_amount))


def with_settlement(
    summary: CustomerBillingSummary, debit_amount: Decimal | None
) -> CustomerBillingSummary:
    debit = debit_amount if debit_amount is not None else ZERO
    summary.debit_amount = debit
    summary.final_amount = settle(summary, debit)
    return summary


def in_date_range(
    records: Iterable[DailyShiftRecord], start: date | str, end: date | str
) -> list[DailyShiftRecord]:
    """Records whose day falls in the inclusive range.

    Days compare as ``yyyy-mm-dd`` strings, which order the same as dates
    because the format is fixed width.
    """
    lo = start.isoformat() if isinstance(start, date) else start
    hi = end.isoformat() if isinstance(end, date) else end
    return [r for r in records if lo <= r.date.isoformat() <= hi]


def customer_daily_rows(
    records: Iterable[DailyShiftRecord], customer_code: str
) -> list[CustomerDayRow]:
    """Day-by-day liters for one customer, newest first, skipping empty days."""
    rows: list[CustomerDayRow] = []
    for record in records:
        row = CustomerDayRow(
            date=record.date,
            cow_morning=_customer_qty(record, Species.COW, Shift.MORNING, customer_code),
            cow_evening=_customer_qty(record, Species.COW, Shift.EVENING, customer_code),
            buffalo_morning=_customer_qty(record, Species.BUFFALO, Shift.MORNING, customer_code),
            buffalo_evening=_customer_qty(record, Species.BUFFALO, Shift.EVENING, customer_code),
        )
        if row.total > 0:
            rows.append(row)
    rows.sort(key=lambda r: r.date, reverse=True)
    return rows


def summarize_rows(rows: Iterable[CustomerDayRow]) -> dict[str, Decimal]:
    totals = {
        "cow_morning": ZERO,
        "cow_evening": ZERO,
        "buffalo_morning": ZERO,
        "buffalo_evening": ZERO,
    }
    for row in rows:
        for key in totals:
            totals[key] += getattr(row, key)
    return totals


def _customer_qty(
    record: DailyShiftRecord, species: Species, shift: Shift, customer_code: str
) -> Decimal:
    return parse_quantity((record.shift(species, shift) or {}).get(customer_code))
