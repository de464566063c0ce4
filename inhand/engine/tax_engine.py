"""
InHand Tax Engine — New Regime, AY 2025-26 (Budget 2025)
Pure Python, deterministic. Same input → same output.

New regime slabs were COMPLETELY REVISED in Budget 2025 (Finance Act 2025):
  Old: 3L/6L/9L/12L/15L breakpoints
  New: 4L/8L/12L/16L/20L/24L breakpoints  ← use these

No 87A rebate is applied. Tax is slab tax + cess on the full taxable income.
"""
from __future__ import annotations

import logging
from typing import Optional

from inhand.engine.schemas import PfPolicy, SlabContribution, TaxInputs, TaxResults

logger = logging.getLogger(__name__)

# ===========================================================================
# NEW REGIME SLAB BREAKPOINTS — Budget 2025
# ===========================================================================

NEW_SLAB_4L  = 400_000
NEW_SLAB_8L  = 800_000
NEW_SLAB_12L = 1_200_000
NEW_SLAB_16L = 1_600_000
NEW_SLAB_20L = 2_000_000
NEW_SLAB_24L = 2_400_000

# ===========================================================================
# DEDUCTION / CONTRIBUTION CONSTANTS
# ===========================================================================

STANDARD_DEDUCTION           = 75_000
CESS_RATE                    = 0.04      # Health & Education cess, on income tax only

EMPLOYEE_PF_RATE             = 0.06
EMPLOYER_PF_RATE             = 0.06      # Same as employee share
GRATUITY_RATE                = 0.0481

MIN_BASIC_PAY_PERCENTAGE     = 50        # Basic pay is never modelled below half of gross
DEFAULT_BASIC_PAY_PERCENTAGE = 50

MONTHS_PER_YEAR              = 12

# ===========================================================================
# SLAB TABLE — list[tuple[label, lower, upper, rate]]
# ===========================================================================

NEW_REGIME_SLABS: list[tuple[str, float, float, float]] = [
    ("0-4L",      0,            NEW_SLAB_4L,   0.00),
    ("4L-8L",     NEW_SLAB_4L,  NEW_SLAB_8L,   0.05),
    ("8L-12L",    NEW_SLAB_8L,  NEW_SLAB_12L,  0.10),
    ("12L-16L",   NEW_SLAB_12L, NEW_SLAB_16L,  0.15),
    ("16L-20L",   NEW_SLAB_16L, NEW_SLAB_20L,  0.20),
    ("20L-24L",   NEW_SLAB_20L, NEW_SLAB_24L,  0.25),
    ("Above 24L", NEW_SLAB_24L, float("inf"),  0.30),
]


# ===========================================================================
# INTERNAL HELPERS (pure functions — no side effects, no I/O)
# ===========================================================================

def calculate_slab_breakdown(taxable_income: float) -> list[SlabContribution]:
    """
    Apply the progressive slab schedule band by band.

    Each band taxes only the income that falls inside it:
        rate * max(0, min(taxable_income, upper) - lower)
    Income exactly on a boundary pays the lower band's rate on that amount.

    Every band is returned (zero-tax bands included) so consumers can choose
    what to display; income tax is the sum of the `tax` values.
    """
    taxable_income = max(0.0, taxable_income)
    breakdown: list[SlabContribution] = []
    for label, lower, upper, rate in NEW_REGIME_SLABS:
        amount = max(0.0, min(taxable_income, upper) - lower)
        breakdown.append(
            SlabContribution(
                label=label,
                lower=float(lower),
                upper=None if upper == float("inf") else float(upper),
                rate=rate,
                taxable_amount=amount,
                tax=rate * amount,
            )
        )
    return breakdown


def _effective_basic_pay_percentage(basic_pay_percentage: Optional[float]) -> float:
    """Floor at 50%. Absent → 50%. Never raises."""
    if basic_pay_percentage is None:
        return float(DEFAULT_BASIC_PAY_PERCENTAGE)
    return float(max(MIN_BASIC_PAY_PERCENTAGE, basic_pay_percentage))


def _calculate_pf(
    gross_salary: float,
    basic_pay: float,
    pf_policy: PfPolicy,
) -> tuple[float, float]:
    """
    Return (employee_pf, employer_pf) for the chosen policy.

    basic_pay  → 6% + 6% of basic pay
    flat_gross → 6% + 6% of gross salary (superseded model)
    """
    if pf_policy == PfPolicy.flat_gross:
        base = gross_salary
    else:
        base = basic_pay
    return base * EMPLOYEE_PF_RATE, base * EMPLOYER_PF_RATE


# ===========================================================================
# PUBLIC API
# ===========================================================================

def calculate_tax(
    gross_salary: float,
    basic_pay_percentage: Optional[float] = None,
    employer_pf_included: bool = False,
    consider_gratuity: bool = False,
    pf_policy: PfPolicy = PfPolicy.basic_pay,
) -> TaxResults:
    """
    Compute tax, PF, gratuity and in-hand salary for one gross salary.

    Total function: a negative gross is treated as 0 and a basic pay
    percentage below 50 is treated as 50. Every subtraction is clamped at 0,
    so no output field is ever negative.

    Args:
        gross_salary: Annual CTC in INR.
        basic_pay_percentage: Basic pay as % of gross (floored at 50).
        employer_pf_included: Also deduct the employer PF share from in-hand.
        consider_gratuity: Subtract the gratuity accrual from net salary.
        pf_policy: Which PF model to apply.

    Returns:
        TaxResults — a fresh, frozen record.
    """
    gross = max(0.0, float(gross_salary))

    # Step 1: Taxable income (never negative)
    taxable_income = max(0.0, gross - STANDARD_DEDUCTION)

    # Step 2: Slab tax
    slab_breakdown = calculate_slab_breakdown(taxable_income)
    income_tax = sum(slab.tax for slab in slab_breakdown)

    # Step 3: Cess on income tax, NOT on gross or taxable income
    cess = income_tax * CESS_RATE

    # Step 4: Total tax
    total_tax = income_tax + cess

    # Step 5: Basic pay (base for PF and gratuity)
    pct = _effective_basic_pay_percentage(basic_pay_percentage)
    basic_pay = gross * (pct / 100)

    # Step 6: Provident fund
    employee_pf, employer_pf = _calculate_pf(gross, basic_pay, pf_policy)

    # Step 7: Gratuity
    gratuity_amount = basic_pay * GRATUITY_RATE if consider_gratuity else 0.0

    # Step 8: Net salary (post tax)
    net_salary = max(0.0, gross - total_tax - gratuity_amount)

    # Step 9: In-hand; employer share also leaves CTC when it is bundled in
    total_pf_deduction = employee_pf + employer_pf if employer_pf_included else employee_pf
    in_hand_salary = max(0.0, net_salary - total_pf_deduction)

    # Step 10: Monthly
    in_hand_salary_per_month = in_hand_salary / MONTHS_PER_YEAR

    effective_tax_rate = (total_tax / gross) * 100 if gross > 0 else 0.0

    logger.debug(
        "calculate_tax policy=%s basic_pct=%.1f employer_pf=%s gratuity=%s",
        pf_policy.value, pct, employer_pf_included, consider_gratuity,
    )

    return TaxResults(
        gross_salary=gross,
        standard_deduction=float(STANDARD_DEDUCTION),
        taxable_income=taxable_income,
        income_tax=income_tax,
        cess=cess,
        total_tax=total_tax,
        net_salary=net_salary,
        basic_pay=basic_pay,
        basic_pay_percentage=pct,
        employee_pf=employee_pf,
        employer_pf=employer_pf,
        total_pf_deduction=total_pf_deduction,
        gratuity_amount=gratuity_amount,
        in_hand_salary=in_hand_salary,
        in_hand_salary_per_month=in_hand_salary_per_month,
        effective_tax_rate=effective_tax_rate,
        employer_pf_included=employer_pf_included,
        consider_gratuity=consider_gratuity,
        pf_policy=pf_policy,
        slab_breakdown=slab_breakdown,
    )


def calculate_tax_for_inputs(inputs: TaxInputs) -> TaxResults:
    """Run calculate_tax() with a validated TaxInputs record."""
    return calculate_tax(
        inputs.gross_salary,
        basic_pay_percentage=inputs.basic_pay_percentage,
        employer_pf_included=inputs.employer_pf_included,
        consider_gratuity=inputs.consider_gratuity,
        pf_policy=inputs.pf_policy,
    )
