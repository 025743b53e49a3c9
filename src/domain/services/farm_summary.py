from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.models.cash_entry import CashEntry, CashEntryType
from src.domain.models.employee import EmployeePayment, PaymentStatus
from src.domain.models.expense import Expense
from src.domain.models.farm_production import FarmProduction

ZERO = Decimal("0")


@dataclass(slots=True)
class FarmSummary:
    days: list[FarmProduction] = field(default_factory=list)
    cow_morning_total: Decimal = ZERO
    cow_evening_total: Decimal = ZERO
    buffalo_morning_total: Decimal = ZERO
    buffalo_evening_total: Decimal = ZERO
    cash_in: Decimal = ZERO
    cash_out: Decimal = ZERO
    total_expenses: Decimal = ZERO

    @property
    def cow_total(self) -> Decimal:
        return self.cow_morning_total + self.cow_evening_total

    @property
    def buffalo_total(self) -> Decimal:
        return self.buffalo_morning_total + self.buffalo_evening_total

    @property
    def total(self) -> Decimal:
        return self.cow_total + self.buffalo_total

    @property
    def net_cash(self) -> Decimal:
        return self.cash_in - self.cash_out


def summarize_farm(
    production: Iterable[FarmProduction],
    cash_entries: Iterable[CashEntry],
    expenses: Iterable[Expense],
) -> FarmSummary:
    """Farm-level view of a period: daily liters (newest first), cash flow and spend."""
    summary = FarmSummary(days=sorted(production, key=lambda d: d.date, reverse=True))
    for day in summary.days:
        summary.cow_morning_total += day.cow_morning_total
        summary.cow_evening_total += day.cow_evening_total
        summary.buffalo_morning_total += day.buffalo_morning_total
        summary.buffalo_evening_total += day.buffalo_evening_total
    for entry in cash_entries:
        if entry.entry_type is CashEntryType.CREDIT:
            summary.cash_in += entry.amount
        else:
            summary.cash_out += entry.amount
    summary.total_expenses = sum((e.amount for e in expenses), ZERO)
    return summary


@dataclass(slots=True, frozen=True)
class PaymentTotals:
    paid: Decimal
    pending: Decimal


def summarize_payments(payments: Iterable[EmployeePayment]) -> PaymentTotals:
    paid = ZERO
    pending = ZERO
    for payment in payments:
        if payment.status is PaymentStatus.RECEIVED:
            paid += payment.amount
        else:
            pending += payment.amount
    return PaymentTotals(paid=paid, pending=pending)
