"""
text_report.py — plain-text downloadable tax report.

Entry point:
    generate_text_report(results, generated_on=None) -> str

Per-slab lines are read from results.slab_breakdown, never recomputed.
"""
from __future__ import annotations

import datetime
import logging
from typing import Optional

from inhand.config import settings
from inhand.engine import TaxResults
from inhand.engine.tax_engine import CESS_RATE, EMPLOYEE_PF_RATE, EMPLOYER_PF_RATE, GRATUITY_RATE
from inhand.reports.formatters import format_currency, format_lpa, format_percent

logger = logging.getLogger(__name__)

DISCLAIMER = (
    "Note: This report is for informational purposes only and should not be "
    "considered as tax advice."
)


def _heading(title: str) -> list[str]:
    return [title, "-" * len(title)]


def _slab_lines(results: TaxResults) -> list[str]:
    lines = []
    for slab in results.slab_breakdown:
        if slab.rate == 0:
            continue
        rate = format_percent(slab.rate)
        if slab.upper is None:
            text = f"- {rate} on income above {format_currency(slab.lower)}"
        else:
            text = (
                f"- {rate} on income between {format_currency(slab.lower + 1)} "
                f"and {format_currency(slab.upper)}"
            )
        lines.append(f"{text}: {format_currency(slab.tax)}")
    return lines


def report_filename(results: TaxResults, extension: str) -> str:
    return f"tax-report-{round(results.gross_salary)}.{extension}"


def generate_text_report(
    results: TaxResults,
    generated_on: Optional[datetime.date] = None,
) -> str:
    """
    Render every TaxResults field as a human-readable report.

    Sections: header → salary details → tax breakdown → deductions →
    final calculation → disclaimer.
    """
    generated_on = generated_on or datetime.date.today()
    title = settings.report_title.upper()

    lines: list[str] = [
        title,
        "=" * len(title),
        f"Generated on: {generated_on.strftime('%d %B %Y')}",
        "",
        *_heading("SALARY DETAILS"),
        f"Gross Salary: {format_currency(results.gross_salary)} ({format_lpa(results.gross_salary)})",
        f"Standard Deduction: {format_currency(results.standard_deduction)}",
        f"Taxable Income: {format_currency(results.taxable_income)} ({format_lpa(results.taxable_income)})",
        f"Basic Pay ({results.basic_pay_percentage:g}% of gross): {format_currency(results.basic_pay)}",
        "",
        *_heading("TAX BREAKDOWN"),
        "Income Tax:",
        *_slab_lines(results),
        "",
        f"Total Income Tax: {format_currency(results.income_tax)}",
        f"Health & Education CESS ({format_percent(CESS_RATE)}): {format_currency(results.cess)}",
        f"Total Tax Liability: {format_currency(results.total_tax)}",
        "",
        *_heading("DEDUCTIONS"),
        f"Employee PF Deduction ({format_percent(EMPLOYEE_PF_RATE)}): {format_currency(results.employee_pf)}",
    ]
    if results.employer_pf_included:
        lines.append(
            f"Employer PF Deduction ({format_percent(EMPLOYER_PF_RATE)}): "
            f"{format_currency(results.employer_pf)}"
        )
    if results.consider_gratuity:
        lines.append(
            f"Gratuity Deduction ({format_percent(GRATUITY_RATE)}): "
            f"{format_currency(results.gratuity_amount)}"
        )

    lines += [
        "",
        *_heading("FINAL CALCULATION"),
        f"Net Salary (Post Tax): {format_currency(results.net_salary)}",
        f"In-hand Salary (Post Tax & PF): {format_currency(results.in_hand_salary)}",
        f"In-hand Salary Per Month: {format_currency(results.in_hand_salary_per_month)}",
        f"Effective Tax Rate: {results.effective_tax_rate:.2f}%",
        "",
        DISCLAIMER,
    ]

    logger.info("Text report generated lines=%d", len(lines))
    return "\n".join(lines)
