from __future__ import annotations

import base64
import io
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from src.infrastructure.reports.pdf_generator import Column

_HEADER_FILL = PatternFill(start_color="FF1B5E20", end_color="FF1B5E20", fill_type="solid")


def _cell_value(value: Any) -> Any:
    # Keep numbers numeric so the sheet can be summed
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return value
    return value


class SpreadsheetExporter:
    """Writes report tables to an .xlsx workbook, one sheet per table."""

    def new_workbook(self) -> Workbook:
        workbook = Workbook()
        workbook.remove(workbook.active)
        return workbook

    def add_sheet(
        self,
        workbook: Workbook,
        title: str,
        rows: list[dict[str, Any]],
        columns: list[Column],
        totals: dict[str, Any] | None = None,
    ) -> None:
        # Sheet titles are capped at 31 characters by Excel
        sheet = workbook.create_sheet(title=title[:31])
        sheet.append([label for _, label in columns])
        for cell in sheet[1]:
            cell.font = Font(bold=True, color="FFFFFFFF")
            cell.fill = _HEADER_FILL
        for row in rows:
            sheet.append([_cell_value(row.get(key)) for key, _ in columns])
        if totals is not None:
            sheet.append([_cell_value(totals.get(key)) for key, _ in columns])
            for cell in sheet[sheet.max_row]:
                cell.font = Font(bold=True)
        for index, (_, label) in enumerate(columns, start=1):
            sheet.column_dimensions[get_column_letter(index)].width = max(12, len(label) + 4)
        sheet.freeze_panes = "A2"

    def to_base64(self, workbook: Workbook) -> str:
        buffer = io.BytesIO()
        workbook.save(buffer)
        return base64.b64encode(buffer.getvalue()).decode("utf-8")
