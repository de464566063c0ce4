"""
hike_impact.py — how each raise percentage changes monthly in-hand pay.

new_gross = base * (1 + hike / 100), computed with the base salary's options.
"""
from __future__ import annotations

from inhand.engine import TaxInputs, calculate_tax_for_inputs
from inhand.reports.schemas import HikeImpactRow, HikeImpactTable

HIKE_PERCENTAGES: tuple[int, ...] = (5, 10, 15, 20, 25, 30, 35, 40, 45, 50)


def build_hike_impact(
    inputs: TaxInputs,
    hike_percentages: tuple[int, ...] = HIKE_PERCENTAGES,
) -> HikeImpactTable:
    """One row per hike, in the order given."""
    base = calculate_tax_for_inputs(inputs)

    rows: list[HikeImpactRow] = []
    for hike in hike_percentages:
        new_gross = inputs.gross_salary * (1 + hike / 100)
        hiked = calculate_tax_for_inputs(inputs.model_copy(update={"gross_salary": new_gross}))
        rows.append(
            HikeImpactRow(
                hike_percentage=hike,
                new_gross_salary=new_gross,
                new_monthly_in_hand=hiked.in_hand_salary_per_month,
                monthly_increase=hiked.in_hand_salary_per_month - base.in_hand_salary_per_month,
            )
        )

    return HikeImpactTable(
        base_gross_salary=base.gross_salary,
        base_monthly_in_hand=base.in_hand_salary_per_month,
        rows=rows,
    )
