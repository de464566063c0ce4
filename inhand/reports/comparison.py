"""
comparison.py — side-by-side results for 2-4 candidate salaries.

One engine call per candidate, all with the same options. Series are keyed
"salary0".."salary3" so a grouped bar chart can plot one bar per candidate
for each metric.
"""
from __future__ import annotations

import json
import logging
from typing import Optional

from inhand.engine import PfPolicy, TaxResults, calculate_tax
from inhand.reports.formatters import format_lpa
from inhand.reports.schemas import (
    MAX_COMPARISON_SALARIES,
    MIN_COMPARISON_SALARIES,
    ComparisonRequest,
    ComparisonResult,
    ComparisonSeries,
)

logger = logging.getLogger(__name__)

# (series name, TaxResults attribute)
COMPARISON_METRICS: list[tuple[str, str]] = [
    ("Gross Salary", "gross_salary"),
    ("Taxable Income", "taxable_income"),
    ("Total Tax", "total_tax"),
    ("In-hand Salary", "in_hand_salary"),
]


def compare_salaries(
    salaries: list[float],
    basic_pay_percentage: Optional[float] = None,
    employer_pf_included: bool = False,
    consider_gratuity: bool = False,
    pf_policy: PfPolicy = PfPolicy.basic_pay,
) -> ComparisonResult:
    """
    Compute every candidate and tabulate the comparison metrics.

    Raises:
        ValueError: JSON list of {field, issue} when fewer than 2 or more
            than 4 salaries are given.
    """
    if not MIN_COMPARISON_SALARIES <= len(salaries) <= MAX_COMPARISON_SALARIES:
        raise ValueError(json.dumps([{
            "field": "salaries",
            "issue": (
                f"Compare between {MIN_COMPARISON_SALARIES} and {MAX_COMPARISON_SALARIES} "
                f"salaries; got {len(salaries)}."
            ),
        }]))

    results: list[TaxResults] = [
        calculate_tax(
            salary,
            basic_pay_percentage=basic_pay_percentage,
            employer_pf_included=employer_pf_included,
            consider_gratuity=consider_gratuity,
            pf_policy=pf_policy,
        )
        for salary in salaries
    ]

    labels = [
        f"Salary {index + 1}: {format_lpa(r.gross_salary) if r.gross_salary > 0 else 'N/A'}"
        for index, r in enumerate(results)
    ]

    series = [
        ComparisonSeries(
            name=name,
            values={f"salary{index}": getattr(r, attr) for index, r in enumerate(results)},
        )
        for name, attr in COMPARISON_METRICS
    ]

    logger.info("Salary comparison computed candidates=%d", len(results))
    return ComparisonResult(results=results, labels=labels, series=series)


def compare_from_request(request: ComparisonRequest) -> ComparisonResult:
    return compare_salaries(
        request.salaries,
        basic_pay_percentage=request.basic_pay_percentage,
        employer_pf_included=request.employer_pf_included,
        consider_gratuity=request.consider_gratuity,
        pf_policy=request.pf_policy,
    )
