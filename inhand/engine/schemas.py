"""
schemas.py — Tax engine Pydantic v2 data contracts (new regime, AY 2025-26).

Defines:
  - PfPolicy          (which provident-fund model the engine applies)
  - TaxInputs         (immutable input boundary — validated once, passed by value)
  - SlabContribution  (tax charged inside one slab band)
  - TaxResults        (flat record of every derived amount — main engine output)

All monetary fields are ANNUAL INR floats, unrounded. Rounding happens only in
reports/formatters.py when a value is rendered.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Salaries are whole rupees with at most this many digits
MAX_SALARY_DIGITS = 13
MAX_GROSS_SALARY = 10 ** MAX_SALARY_DIGITS


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PfPolicy(str, Enum):
    """
    Provident-fund model.

    basic_pay  — 6% employee + 6% employer, both on basic pay (current model).
    flat_gross — 6% employee + 6% employer, both on gross salary (superseded;
                 kept so older payslips can be reproduced).
    """
    basic_pay = "basic_pay"
    flat_gross = "flat_gross"


# ---------------------------------------------------------------------------
# TaxInputs — the single input record for one engine call
# ---------------------------------------------------------------------------

class TaxInputs(BaseModel):
    """
    Everything the engine needs for one computation.

    gross_salary must be finite, >= 0 and below MAX_GROSS_SALARY.
    basic_pay_percentage below 50 is ACCEPTED — the engine floors it to 50 and
    the API attaches an advisory message instead of failing.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    gross_salary: float = Field(
        ..., ge=0, lt=MAX_GROSS_SALARY, allow_inf_nan=False,
        description="Annual gross salary (CTC) in INR.",
    )
    basic_pay_percentage: Optional[float] = Field(
        default=None, le=100,
        description="Basic pay as % of gross. Floored at 50 by the engine; omitted → 50.",
    )
    employer_pf_included: bool = Field(
        default=False,
        description="CTC already bundles the employer PF share — deduct it from in-hand too.",
    )
    consider_gratuity: bool = Field(
        default=False,
        description="Subtract the 4.81% gratuity accrual on basic pay from net salary.",
    )
    pf_policy: PfPolicy = Field(
        default=PfPolicy.basic_pay,
        description="PF model: 'basic_pay' (default) or the superseded 'flat_gross'.",
    )


# ---------------------------------------------------------------------------
# SlabContribution — one row of the progressive slab computation
# ---------------------------------------------------------------------------

class SlabContribution(BaseModel):
    """
    Tax charged inside one band of the slab schedule.

    taxable_amount = max(0, min(taxable_income, upper) - lower)
    tax            = rate * taxable_amount
    upper is None for the open top band (above ₹24L).
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str                   # "0-4L", "4L-8L", ..., "Above 24L"
    lower: float
    upper: Optional[float]
    rate: float
    taxable_amount: float
    tax: float


# ---------------------------------------------------------------------------
# TaxResults — public output of calculate_tax()
# ---------------------------------------------------------------------------

class TaxResults(BaseModel):
    """
    Complete result of one engine call. Created fresh per call, never mutated.

    Computation sequence (order determines correctness):
      1. taxable_income = max(0, gross_salary - standard_deduction)
      2. income_tax     = sum of slab_breakdown[*].tax
      3. cess           = 4% of income_tax   ← NOT on gross or taxable income
      4. total_tax      = income_tax + cess
      5. basic_pay      = gross_salary * basic_pay_percentage / 100
      6. employee_pf / employer_pf per pf_policy
      7. gratuity_amount = 4.81% of basic_pay (only if consider_gratuity)
      8. net_salary     = gross_salary - total_tax - gratuity_amount
      9. in_hand_salary = net_salary - employee_pf [- employer_pf]
     10. in_hand_salary_per_month = in_hand_salary / 12
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    gross_salary: float
    standard_deduction: float
    taxable_income: float
    income_tax: float            # Slab tax, before cess
    cess: float                  # 4% of income_tax
    total_tax: float             # income_tax + cess
    net_salary: float            # Post tax (and gratuity, when considered)

    basic_pay: float
    basic_pay_percentage: float  # Effective value after the 50% floor
    employee_pf: float
    employer_pf: float
    total_pf_deduction: float    # What actually leaves in-hand pay
    gratuity_amount: float

    in_hand_salary: float
    in_hand_salary_per_month: float
    effective_tax_rate: float    # total_tax / gross_salary as a percentage

    employer_pf_included: bool
    consider_gratuity: bool
    pf_policy: PfPolicy

    slab_breakdown: List[SlabContribution] = Field(default_factory=list)


__all__ = [
    "PfPolicy",
    "TaxInputs",
    "SlabContribution",
    "TaxResults",
]
