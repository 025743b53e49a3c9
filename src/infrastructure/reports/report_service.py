from __future__ import annotations

import uuid
from dataclasses import asdict
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from src.application.use_cases.reports.customer_billing_report import CustomerBillingReport
from src.application.use_cases.reports.customer_statement import CustomerStatement
from src.domain.models.farm_profile import FarmProfile
from src.domain.models.purchase_order import PurchaseOrder, ReceivingRecord
from src.domain.services.farm_summary import FarmSummary
from src.infrastructure.reports.pdf_generator import WIDE_TABLE_WIDTH, Column, PDFGenerator
from src.infrastructure.reports.spreadsheet_exporter import SpreadsheetExporter
from src.interfaces.http.schemas.reports import ReportResponse

BILLING_COLUMNS: list[Column] = [
    ("customer_code", "Code"),
    ("name", "Customer"),
    ("cow_morning", "Cow AM"),
    ("cow_evening", "Cow PM"),
    ("buffalo_morning", "Buffalo AM"),
    ("buffalo_evening", "Buffalo PM"),
    ("total", "Total (L)"),
    ("amount", "Amount"),
    ("debit_amount", "Debit"),
    ("final_amount", "Final"),
]

STATEMENT_COLUMNS: list[Column] = [
    ("date", "Date"),
    ("cow_morning", "Cow AM"),
    ("cow_evening", "Cow PM"),
    ("buffalo_morning", "Buffalo AM"),
    ("buffalo_evening", "Buffalo PM"),
    ("total", "Total (L)"),
]

FARM_COLUMNS: list[Column] = [
    ("date", "Date"),
    ("cow_morning_total", "Cow AM"),
    ("cow_evening_total", "Cow PM"),
    ("buffalo_morning_total", "Buffalo AM"),
    ("buffalo_evening_total", "Buffalo PM"),
    ("total", "Total (L)"),
]

PO_COLUMNS: list[Column] = [
    ("name", "Item"),
    ("qty", "Qty"),
    ("unit", "Unit"),
    ("price", "Price"),
    ("line_total", "Total"),
]

RECEIVING_COLUMNS: list[Column] = [
    ("received_at", "Received"),
    ("name", "Item"),
    ("qty", "Ordered"),
    ("received_qty", "Received qty"),
    ("status", "Status after"),
]


def _period_label(date_from: date, date_to: date) -> str:
    return f"{date_from.strftime('%d/%m/%Y')} - {date_to.strftime('%d/%m/%Y')}"


class ReportService:
    def __init__(
        self,
        pdf_generator: PDFGenerator,
        spreadsheet_exporter: SpreadsheetExporter,
        *,
        currency: str = "PKR",
    ):
        self.pdf_generator = pdf_generator
        self.spreadsheet_exporter = spreadsheet_exporter
        self.currency = currency

    @staticmethod
    def _round_floats(obj, ndigits: int = 2):
        """Recursively turn Decimals into rounded floats for JSON output."""
        if isinstance(obj, dict):
            return {k: ReportService._round_floats(v, ndigits) for k, v in obj.items()}
        if isinstance(obj, (list, tuple)):
            return [ReportService._round_floats(v, ndigits) for v in obj]
        if isinstance(obj, (float, Decimal)):
            return round(float(obj), ndigits)
        if isinstance(obj, (date, datetime)):
            return obj.isoformat()
        if isinstance(obj, Enum):
            return obj.value
        return obj

    def _response(
        self,
        *,
        title: str,
        fmt: str,
        file_stem: str,
        data: dict[str, Any] | None = None,
        content: str | None = None,
    ) -> ReportResponse:
        extension = {"json": "json", "pdf": "pdf", "xlsx": "xlsx"}[fmt]
        return ReportResponse(
            report_id=str(uuid.uuid4()),
            title=title,
            generated_at=datetime.now(timezone.utc).isoformat(),
            format=fmt,
            content=content,
            data=self._round_floats(data) if data is not None else None,
            file_name=f"{file_stem}.{extension}",
        )

    def customer_billing(
        self, report: CustomerBillingReport, profile: FarmProfile | None, fmt: str
    ) -> ReportResponse:
        title = "Customer Billing Report"
        file_stem = f"customers_{report.date_from}_{report.date_to}"
        rows = [asdict(row) for row in report.rows]
        totals = dict(report.totals, customer_code="", name="Total")
        if fmt == "json":
            data = {
                "date_from": report.date_from,
                "date_to": report.date_to,
                "currency": self.currency,
                "rows": rows,
                "totals": report.totals,
            }
            return self._response(title=title, fmt=fmt, file_stem=file_stem, data=data)
        if fmt == "xlsx":
            workbook = self.spreadsheet_exporter.new_workbook()
            self.spreadsheet_exporter.add_sheet(
                workbook, "Customers", rows, BILLING_COLUMNS, totals
            )
            content = self.spreadsheet_exporter.to_base64(workbook)
            return self._response(title=title, fmt=fmt, file_stem=file_stem, content=content)

        elements = self.pdf_generator.create_header(
            title, _period_label(report.date_from, report.date_to), profile
        )
        elements += self.pdf_generator.create_table_section(
            f"Customers ({self.currency})",
            rows,
            BILLING_COLUMNS,
            totals,
            width=WIDE_TABLE_WIDTH,
        )
        content = self.pdf_generator.generate_pdf(elements, wide=True)
        return self._response(title=title, fmt=fmt, file_stem=file_stem, content=content)

    def customer_statement(
        self, statement: CustomerStatement, profile: FarmProfile | None, fmt: str
    ) -> ReportResponse:
        customer = statement.customer
        summary = statement.summary
        title = f"Statement for {customer.name} ({customer.customer_code})"
        file_stem = f"customer_{customer.customer_code}_{statement.date_from}_{statement.date_to}"
        rows = [dict(asdict(row), total=row.total) for row in statement.rows]
        totals = dict(statement.shift_totals, date="Total", total=summary.total)
        billing = {
            "cow_total": summary.cow_total,
            "buffalo_total": summary.buffalo_total,
            "cow_rate": customer.cow_rate,
            "buffalo_rate": customer.buffalo_rate,
            "amount": summary.amount,
            "debit_amount": summary.debit_amount,
            "final_amount": summary.final_amount,
        }
        if fmt == "json":
            data = {
                "customer_code": customer.customer_code,
                "name": customer.name,
                "phone": customer.phone,
                "date_from": statement.date_from,
                "date_to": statement.date_to,
                "currency": self.currency,
                "rows": rows,
                "totals": statement.shift_totals,
                "billing": billing,
            }
            return self._response(title=title, fmt=fmt, file_stem=file_stem, data=data)
        if fmt == "xlsx":
            workbook = self.spreadsheet_exporter.new_workbook()
            self.spreadsheet_exporter.add_sheet(workbook, "Daily", rows, STATEMENT_COLUMNS, totals)
            self.spreadsheet_exporter.add_sheet(
                workbook,
                "Billing",
                [{"item": k, "value": v} for k, v in billing.items()],
                [("item", "Item"), ("value", "Value")],
            )
            content = self.spreadsheet_exporter.to_base64(workbook)
            return self._response(title=title, fmt=fmt, file_stem=file_stem, content=content)

        elements = self.pdf_generator.create_header(
            title, _period_label(statement.date_from, statement.date_to), profile
        )
        elements += self.pdf_generator.create_table_section(
            "Daily milk", rows, STATEMENT_COLUMNS, totals
        )
        elements += self.pdf_generator.create_kpi_section(
            "Billing",
            {
                "Cow liters": summary.cow_total,
                "Buffalo liters": summary.buffalo_total,
                f"Cow rate ({self.currency}/L)": customer.cow_rate or Decimal("0"),
                f"Buffalo rate ({self.currency}/L)": customer.buffalo_rate or Decimal("0"),
                f"Amount ({self.currency})": summary.amount,
                f"Debit ({self.currency})": summary.debit_amount,
                f"Final amount ({self.currency})": summary.final_amount,
            },
        )
        content = self.pdf_generator.generate_pdf(elements)
        return self._response(title=title, fmt=fmt, file_stem=file_stem, content=content)

    def farm(
        self,
        summary: FarmSummary,
        date_from: date,
        date_to: date,
        profile: FarmProfile | None,
        fmt: str,
    ) -> ReportResponse:
        title = "Farm Report"
        file_stem = f"farm_{date_from}_{date_to}"
        rows = [dict(asdict(day), total=day.total) for day in summary.days]
        totals = {
            "date": "Total",
            "cow_morning_total": summary.cow_morning_total,
            "cow_evening_total": summary.cow_evening_total,
            "buffalo_morning_total": summary.buffalo_morning_total,
            "buffalo_evening_total": summary.buffalo_evening_total,
            "total": summary.total,
        }
        cash = {
            "cash_in": summary.cash_in,
            "cash_out": summary.cash_out,
            "net_cash": summary.net_cash,
            "total_expenses": summary.total_expenses,
        }
        if fmt == "json":
            for row in rows:
                row.pop("tenant_id", None)
                row.pop("updated_at", None)
            data = {
                "date_from": date_from,
                "date_to": date_to,
                "currency": self.currency,
                "days": rows,
                "totals": totals,
                "cow_total": summary.cow_total,
                "buffalo_total": summary.buffalo_total,
                **cash,
            }
            return self._response(title=title, fmt=fmt, file_stem=file_stem, data=data)
        if fmt == "xlsx":
            workbook = self.spreadsheet_exporter.new_workbook()
            self.spreadsheet_exporter.add_sheet(workbook, "Production", rows, FARM_COLUMNS, totals)
            self.spreadsheet_exporter.add_sheet(
                workbook,
                "Cash",
                [{"item": k, "value": v} for k, v in cash.items()],
                [("item", "Item"), ("value", "Value")],
            )
            content = self.spreadsheet_exporter.to_base64(workbook)
            return self._response(title=title, fmt=fmt, file_stem=file_stem, content=content)

        elements = self.pdf_generator.create_header(
            title, _period_label(date_from, date_to), profile
        )
        elements += self.pdf_generator.create_table_section(
            "Milk production (L)", rows, FARM_COLUMNS, totals
        )
        elements += self.pdf_generator.create_kpi_section(
            f"Cash and expenses ({self.currency})",
            {
                "Cash in": summary.cash_in,
                "Cash out": summary.cash_out,
                "Net cash": summary.net_cash,
                "Expenses": summary.total_expenses,
            },
        )
        content = self.pdf_generator.generate_pdf(elements)
        return self._response(title=title, fmt=fmt, file_stem=file_stem, content=content)

    def purchase_order(
        self,
        order: PurchaseOrder,
        receivings: list[ReceivingRecord],
        profile: FarmProfile | None,
    ) -> ReportResponse:
        title = f"Purchase Order {order.po_number}"
        subtitle = (
            f"Vendor: {order.vendor} | Status: {order.status.value} | "
            f"Date: {order.created_at.strftime('%d/%m/%Y')}"
        )
        items = [dict(asdict(item), line_total=item.line_total) for item in order.items]
        totals = {"name": "Total", "line_total": order.total_amount}
        elements = self.pdf_generator.create_header(title, subtitle, profile)
        elements += self.pdf_generator.create_table_section(
            f"Items ({self.currency})", items, PO_COLUMNS, totals
        )
        if receivings:
            received_rows = [
                {
                    "received_at": record.received_at,
                    "name": line.name,
                    "qty": line.qty,
                    "received_qty": line.received_qty,
                    "status": record.status.value,
                }
                for record in receivings
                for line in record.items
            ]
            elements += self.pdf_generator.create_table_section(
                "Receiving history", received_rows, RECEIVING_COLUMNS
            )
        content = self.pdf_generator.generate_pdf(elements)
        return self._response(
            title=title, fmt="pdf", file_stem=order.po_number.lower(), content=content
        )
