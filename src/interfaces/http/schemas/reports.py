from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel

ReportFormat = Literal["json", "pdf", "xlsx"]


class ReportRequest(BaseModel):
    date_from: date
    date_to: date
    format: ReportFormat = "pdf"
    # Customer report only: also list customers with no milk in the period
    include_inactive: bool = False


class ReportResponse(BaseModel):
    report_id: str
    title: str
    generated_at: str
    format: str
    content: str | None = None  # base64 for PDF/XLSX
    data: dict[str, Any] | None = None  # structured data when format=json
    file_name: str | None = None
