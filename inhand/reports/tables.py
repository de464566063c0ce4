"""
tables.py — row builders for the results table and the slab explainer.

Labels mirror what a payslip reader expects; row order is fixed:
  tax block → PF block → gratuity (optional) → in-hand block.
"""
from __future__ import annotations

from inhand.engine import TaxResults, calculate_slab_breakdown
from inhand.engine.tax_engine import (
    CESS_RATE,
    EMPLOYEE_PF_RATE,
    EMPLOYER_PF_RATE,
    GRATUITY_RATE,
    NEW_REGIME_SLABS,
)
from inhand.reports.formatters import format_currency, format_lpa, format_percent
from inhand.reports.schemas import SlabExplainerRow, TableRow

# Example income used for the open top band in the slab explainer
OPEN_BAND_EXAMPLE_INCOME = 3_000_000


def _row(label: str, amount: float, highlighted: bool = False, final: bool = False) -> TableRow:
    return TableRow(
        label=label,
        amount=amount,
        currency=format_currency(amount),
        lpa=format_lpa(amount),
        highlighted=highlighted,
        final=final,
    )


def build_results_table(results: TaxResults) -> list[TableRow]:
    """
    Build the ordered rows of the results table.

    Employer PF and the combined PF total appear only when the employer share
    is deducted from in-hand; the gratuity row only when gratuity is considered.
    """
    rows = [
        _row("Gross Salary", results.gross_salary),
        _row("Standard Deduction", results.standard_deduction),
        _row("Taxable Income", results.taxable_income),
        _row("Income Tax", results.income_tax),
        _row(f"Health & Education CESS ({format_percent(CESS_RATE)})", results.cess),
        _row("Total Tax", results.total_tax, highlighted=True),
        _row("Net Salary (Post Tax)", results.net_salary),
    ]

    employee_label = f"Employee PF Deduction ({format_percent(EMPLOYEE_PF_RATE)})"
    if results.employer_pf_included:
        rows += [
            _row(employee_label, results.employee_pf),
            _row(f"Employer PF Deduction ({format_percent(EMPLOYER_PF_RATE)})", results.employer_pf),
            _row(
                f"Total PF Deduction ({format_percent(EMPLOYEE_PF_RATE + EMPLOYER_PF_RATE)})",
                results.total_pf_deduction,
                highlighted=True,
            ),
        ]
    else:
        rows.append(_row(employee_label, results.employee_pf))

    if results.consider_gratuity:
        rows.append(
            _row(
                f"Gratuity Deduction ({format_percent(GRATUITY_RATE)})",
                results.gratuity_amount,
                highlighted=True,
            )
        )

    rows += [
        _row("In-hand Salary Per Month", results.in_hand_salary_per_month, highlighted=True, final=True),
        _row("In-hand Salary Per Year", results.in_hand_salary, highlighted=True, final=True),
    ]
    return rows


def _cumulative_tax(income: float) -> float:
    return sum(slab.tax for slab in calculate_slab_breakdown(income))


def build_slab_explainer() -> list[SlabExplainerRow]:
    """
    Static explanation of the slab schedule, one row per band.

    Examples are computed from the same slab formula as the engine, so the
    explainer can never disagree with a calculated result.
    """
    rows: list[SlabExplainerRow] = []
    for _label, lower, upper, rate in NEW_REGIME_SLABS:
        if upper == float("inf"):
            range_text = f"Above {format_currency(lower)}"
            example_income = OPEN_BAND_EXAMPLE_INCOME
        elif lower == 0:
            range_text = f"{format_currency(0)} - {format_currency(upper)}"
            example_income = upper
        else:
            range_text = f"{format_currency(lower + 1)} - {format_currency(upper)}"
            example_income = upper

        tax = _cumulative_tax(example_income)
        if tax == 0:
            example = f"No tax on first {format_currency(example_income)}"
        else:
            example = f"{format_currency(tax)} on income of {format_currency(example_income)}"

        rows.append(SlabExplainerRow(range=range_text, rate=format_percent(rate), example=example))
    return rows
