from __future__ import annotations

import base64
import io
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from src.domain.models.farm_profile import FarmProfile

Column = tuple[str, str]  # (row key, header label)

PAGE_TABLE_WIDTH = 6.5 * inch
WIDE_TABLE_WIDTH = 10 * inch


def format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Decimal):
        return f"{value:,.2f}"
    if isinstance(value, (date, datetime)):
        return value.strftime("%d/%m/%Y")
    return str(value)


class PDFGenerator:
    def __init__(self):
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self):
        """Setup custom paragraph styles"""
        self.styles.add(
            ParagraphStyle(
                name="CustomTitle",
                parent=self.styles["Heading1"],
                fontSize=18,
                spaceAfter=12,
                textColor=colors.darkgreen,
                alignment=1,  # Center
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="CustomHeading",
                parent=self.styles["Heading2"],
                fontSize=14,
                spaceAfter=12,
                textColor=colors.darkgreen,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="FarmLine",
                parent=self.styles["Normal"],
                fontSize=9,
                alignment=1,
                textColor=colors.grey,
            )
        )

    def create_header(
        self, title: str, subtitle: str | None = None, profile: FarmProfile | None = None
    ) -> list:
        """Report title, farm letterhead when the profile is filled in, and generation time."""
        elements = []
        if profile is not None and profile.has_details:
            elements.append(Paragraph(profile.farm_name, self.styles["CustomTitle"]))
            location = ", ".join(part for part in (profile.city, profile.country) if part)
            contact = " | ".join(part for part in (profile.contact, profile.email) if part)
            for line in (location, contact):
                if line:
                    elements.append(Paragraph(line, self.styles["FarmLine"]))
            elements.append(Spacer(1, 10))
        elements.append(Paragraph(title, self.styles["CustomHeading"]))
        if subtitle:
            elements.append(Paragraph(subtitle, self.styles["Normal"]))
        gen_date = datetime.now(timezone.utc).strftime("%d/%m/%Y %H:%M UTC")
        elements.append(Paragraph(f"Generated: {gen_date}", self.styles["Normal"]))
        elements.append(Spacer(1, 16))
        return elements

    def create_kpi_section(self, title: str, kpis: dict[str, Any]) -> list:
        elements = [Paragraph(title, self.styles["CustomHeading"])]
        data = [[label, format_cell(value)] for label, value in kpis.items()]
        if data:
            table = Table(data, colWidths=[3 * inch, 2 * inch])
            table.setStyle(
                TableStyle(
                    [
                        ("BACKGROUND", (0, 0), (-1, -1), colors.whitesmoke),
                        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
                        ("FONTSIZE", (0, 0), (-1, -1), 10),
                        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                    ]
                )
            )
            elements.append(table)
        elements.append(Spacer(1, 16))
        return elements

    def create_table_section(
        self,
        title: str,
        rows: list[dict[str, Any]],
        columns: list[Column],
        totals: dict[str, Any] | None = None,
        width: float = PAGE_TABLE_WIDTH,
    ) -> list:
        """Table with a header row and, when ``totals`` is given, a bold totals row."""
        elements = [Paragraph(title, self.styles["CustomHeading"])]
        if not rows:
            elements.append(Paragraph("No records for this period", self.styles["Normal"]))
            elements.append(Spacer(1, 16))
            return elements

        table_data = [[label for _, label in columns]]
        for row in rows:
            table_data.append([format_cell(row.get(key)) for key, _ in columns])
        if totals is not None:
            table_data.append([format_cell(totals.get(key, "")) for key, _ in columns])

        col_width = width / len(columns)
        style = [
            ("BACKGROUND", (0, 0), (-1, 0), colors.darkgreen),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
            ("ALIGN", (0, 0), (-1, -1), "CENTER"),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, 0), 9),
            ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 1), (-1, -1), 8),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]
        if totals is not None:
            style += [
                ("BACKGROUND", (0, -1), (-1, -1), colors.lightgrey),
                ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
            ]
        table = Table(table_data, colWidths=[col_width] * len(columns), repeatRows=1)
        table.setStyle(TableStyle(style))
        elements.append(table)
        elements.append(Spacer(1, 16))
        return elements

    def generate_pdf(self, elements: list, *, wide: bool = False) -> str:
        """Generate PDF and return as base64 string"""
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=landscape(A4) if wide else A4,
            rightMargin=36,
            leftMargin=36,
            topMargin=36,
            bottomMargin=18,
        )
        doc.build(elements)
        pdf_data = buffer.getvalue()
        buffer.close()
        return base64.b64encode(pdf_data).decode("utf-8")
