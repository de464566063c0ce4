"""
pdf_generator.py — InHand PDF report generator.

Builds a formatted PDF tax summary using reportlab PLATYPUS.
Output is a BytesIO buffer (no temp file on disk).

Entry point:
    generate_pdf_report(results, generated_on=None) -> BytesIO

CRITICAL: buffer.seek(0) is called after doc.build(story) — reportlab leaves
the buffer position at the end after writing. Skipping seek(0) produces a
0-byte PDF response.

PDF sections:
  1. Header (title, generated date)
  2. In-hand callout box (green highlighted)
  3. Results table (same rows as the on-screen table)
  4. Slab breakdown table (from results.slab_breakdown)
  5. Disclaimer footer (8pt)

Colour palette:
  - #D5F5E3  GREEN_LIGHT  In-hand callout, highlighted rows
  - #F2F2F2  GREY_LIGHT   Table headers
"""
from __future__ import annotations

import datetime
import logging
from io import BytesIO
from typing import Optional

from reportlab.lib.colors import HexColor, black
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    KeepTogether,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from inhand.config import settings
from inhand.engine import TaxResults
from inhand.reports.formatters import format_currency, format_percent
from inhand.reports.tables import build_results_table
from inhand.reports.text_report import DISCLAIMER

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Colour constants
# ---------------------------------------------------------------------------

GREEN_LIGHT = HexColor("#D5F5E3")
GREY_LIGHT  = HexColor("#F2F2F2")

# reportlab's built-in Helvetica has no ₹ glyph
_PDF_RUPEE = "Rs. "


def _pdf_money(amount: float) -> str:
    return format_currency(amount).replace("₹", _PDF_RUPEE)


# ---------------------------------------------------------------------------
# Private section builders
# ---------------------------------------------------------------------------

def _build_results_table(results: TaxResults) -> Table:
    """
    Label | Amount | LPA, one row per results-table entry.

    Highlighted rows (total tax, PF total, gratuity, in-hand) get GREEN_LIGHT;
    final in-hand rows are bold.
    """
    rows = build_results_table(results)
    data = [["", "Amount", "LPA"]]
    data += [[row.label, _pdf_money(row.amount), row.lpa] for row in rows]

    style_cmds = [
        ("BACKGROUND", (0, 0), (-1, 0), GREY_LIGHT),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.5, black),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
        ("ALIGN", (0, 0), (0, -1), "LEFT"),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ("LEFTPADDING", (0, 0), (0, -1), 6),
    ]
    for index, row in enumerate(rows, start=1):
        if row.highlighted:
            style_cmds.append(("BACKGROUND", (0, index), (-1, index), GREEN_LIGHT))
        if row.final:
            style_cmds.append(("FONTNAME", (0, index), (-1, index), "Helvetica-Bold"))

    t = Table(data, colWidths=[90 * mm, 45 * mm, 35 * mm])
    t.setStyle(TableStyle(style_cmds))
    return t


def _build_slab_table(results: TaxResults) -> Table:
    """Band | Rate | Income in band | Tax — every band, zero rows included."""
    header = ["Slab", "Rate", "Income in Slab", "Tax"]
    rows = [
        [
            slab.label,
            format_percent(slab.rate),
            _pdf_money(slab.taxable_amount),
            _pdf_money(slab.tax),
        ]
        for slab in results.slab_breakdown
    ]
    rows.append(["Total Income Tax", "", "", _pdf_money(results.income_tax)])

    style_cmds = [
        ("BACKGROUND", (0, 0), (-1, 0), GREY_LIGHT),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.5, black),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
        ("ALIGN", (0, 0), (0, -1), "LEFT"),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ("LEFTPADDING", (0, 0), (0, -1), 6),
    ]

    t = Table([header] + rows, colWidths=[45 * mm, 25 * mm, 50 * mm, 50 * mm])
    t.setStyle(TableStyle(style_cmds))
    return t


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def generate_pdf_report(
    results: TaxResults,
    generated_on: Optional[datetime.date] = None,
) -> BytesIO:
    """
    Generate a complete formatted PDF report.

    Args:
        results: TaxResults from calculate_tax().
        generated_on: Date printed in the header; defaults to today.

    Returns:
        BytesIO buffer at position 0, ready for StreamingResponse.
    """
    generated_on = generated_on or datetime.date.today()

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=20 * mm,
        bottomMargin=20 * mm,
        title=settings.report_title,
    )

    styles = getSampleStyleSheet()
    story = []

    # -----------------------------------------------------------------------
    # 1. Header block
    # -----------------------------------------------------------------------

    title_style = ParagraphStyle(
        "report_title",
        parent=styles["Heading1"],
        fontSize=18,
        fontName="Helvetica-Bold",
    )
    story.append(Paragraph(settings.report_title, title_style))
    story.append(Spacer(1, 2 * mm))
    story.append(
        Paragraph(
            f"Report generated: {generated_on.strftime('%d %B %Y')}",
            styles["Normal"],
        )
    )
    story.append(
        Paragraph(
            f"Basic pay: {results.basic_pay_percentage:g}% of gross. "
            f"Employer PF deducted from in-hand: {'Yes' if results.employer_pf_included else 'No'}. "
            f"Gratuity considered: {'Yes' if results.consider_gratuity else 'No'}.",
            styles["Normal"],
        )
    )
    story.append(Spacer(1, 6 * mm))

    # -----------------------------------------------------------------------
    # 2. In-hand callout box: single-cell Table with GREEN_LIGHT background
    # -----------------------------------------------------------------------

    callout_style = ParagraphStyle(
        "callout",
        parent=styles["Normal"],
        fontSize=14,
        fontName="Helvetica-Bold",
    )
    callout_text = (
        f"Monthly in-hand: {_pdf_money(results.in_hand_salary_per_month)} "
        f"(effective tax rate {results.effective_tax_rate:.2f}%)"
    )
    callout_table = Table(
        [[Paragraph(callout_text, callout_style)]],
        colWidths=[170 * mm],
    )
    callout_table.setStyle(
        TableStyle([
            ("BACKGROUND", (0, 0), (-1, -1), GREEN_LIGHT),
            ("BOX", (0, 0), (-1, -1), 1, black),
            ("TOPPADDING", (0, 0), (-1, -1), 10),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 10),
            ("LEFTPADDING", (0, 0), (-1, -1), 12),
        ])
    )
    story.append(callout_table)
    story.append(Spacer(1, 8 * mm))

    # -----------------------------------------------------------------------
    # 3. Results table
    # -----------------------------------------------------------------------

    results_heading = Paragraph("Salary Breakdown", styles["Heading2"])
    story.append(KeepTogether([results_heading, Spacer(1, 2 * mm), _build_results_table(results)]))
    story.append(Spacer(1, 6 * mm))

    # -----------------------------------------------------------------------
    # 4. Slab breakdown table
    # -----------------------------------------------------------------------

    slab_heading = Paragraph("Income Tax by Slab", styles["Heading2"])
    story.append(KeepTogether([slab_heading, Spacer(1, 2 * mm), _build_slab_table(results)]))

    # -----------------------------------------------------------------------
    # 5. Disclaimer (8pt, end of last page)
    # -----------------------------------------------------------------------

    disclaimer_style = ParagraphStyle(
        "disclaimer",
        parent=styles["Normal"],
        fontSize=8,
        textColor=black,
    )
    story.append(Spacer(1, 10 * mm))
    story.append(Paragraph(DISCLAIMER, disclaimer_style))

    # -----------------------------------------------------------------------
    # Build document — CRITICAL: buffer.seek(0) after build
    # -----------------------------------------------------------------------

    doc.build(story)
    buffer.seek(0)

    logger.info("PDF report generated bytes=%d", len(buffer.getvalue()))
    return buffer
