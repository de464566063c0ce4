"""
charts.py — data series for the tax breakdown chart.

Slices come straight from TaxResults.slab_breakdown; nothing here re-derives
slab tax from taxable income.
"""
from __future__ import annotations

from inhand.engine import TaxResults
from inhand.engine.tax_engine import CESS_RATE, EMPLOYEE_PF_RATE, EMPLOYER_PF_RATE
from inhand.reports.formatters import format_percent
from inhand.reports.schemas import ChartData, ChartSlice


def build_tax_breakdown_chart(results: TaxResults) -> ChartData:
    """
    Slices: every slab that charged tax, then cess and PF when non-zero.

    The PF slice is the amount that actually leaves in-hand pay, labelled with
    the combined rate when the employer share is included.
    """
    parts: list[tuple[str, float]] = [
        (slab.label, slab.tax) for slab in results.slab_breakdown if slab.tax > 0
    ]

    if results.cess > 0:
        parts.append((f"CESS ({format_percent(CESS_RATE)})", results.cess))

    pf_rate = EMPLOYEE_PF_RATE + EMPLOYER_PF_RATE if results.employer_pf_included else EMPLOYEE_PF_RATE
    if results.total_pf_deduction > 0:
        parts.append((f"PF ({format_percent(pf_rate)})", results.total_pf_deduction))

    total = sum(amount for _, amount in parts)
    slices = [
        ChartSlice(
            name=name,
            amount=amount,
            share=(amount / total) * 100 if total > 0 else 0.0,
        )
        for name, amount in parts
    ]
    return ChartData(slices=slices, total=total)
