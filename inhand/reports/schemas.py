"""
schemas.py — Pydantic v2 contracts for everything rendered from TaxResults.

Defines:
  - TableRow, SlabExplainerRow        (results table / slab explainer)
  - ChartSlice, ChartData             (tax breakdown chart)
  - ComparisonRequest, ComparisonSeries, ComparisonResult
  - HikeImpactRow, HikeImpactTable
  - CalculationResponse               (POST /api/calculate body)

None of these hold tax logic — every number comes from calculate_tax().
"""
from __future__ import annotations

from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from inhand.engine.schemas import MAX_GROSS_SALARY, PfPolicy, TaxResults


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

class TableRow(BaseModel):
    """One labelled amount in the results table."""
    model_config = ConfigDict(extra="forbid")

    label: str
    amount: float
    currency: str                # "₹12,00,000"
    lpa: str                     # "12.00 LPA"
    highlighted: bool = False
    final: bool = False          # In-hand rows at the bottom


class SlabExplainerRow(BaseModel):
    model_config = ConfigDict(extra="forbid")

    range: str                   # "₹4,00,001 - ₹8,00,000"
    rate: str                    # "5%"
    example: str                 # "₹20,000 on income of ₹8,00,000"


# ---------------------------------------------------------------------------
# Chart
# ---------------------------------------------------------------------------

class ChartSlice(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str                    # "4L-8L", "CESS (4%)", "PF (6%)"
    amount: float
    share: float                 # Percentage of the chart total, 0-100


class ChartData(BaseModel):
    model_config = ConfigDict(extra="forbid")

    slices: List[ChartSlice] = Field(default_factory=list)
    total: float = 0


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

MIN_COMPARISON_SALARIES = 2
MAX_COMPARISON_SALARIES = 4


class ComparisonRequest(BaseModel):
    """2-4 candidate salaries computed with the same options."""
    model_config = ConfigDict(extra="forbid")

    salaries: List[Annotated[float, Field(ge=0, lt=MAX_GROSS_SALARY, allow_inf_nan=False)]] = Field(
        ...,
        min_length=MIN_COMPARISON_SALARIES,
        max_length=MAX_COMPARISON_SALARIES,
        description="Candidate annual gross salaries (INR).",
    )
    basic_pay_percentage: Optional[float] = Field(default=None, le=100)
    employer_pf_included: bool = False
    consider_gratuity: bool = False
    pf_policy: PfPolicy = PfPolicy.basic_pay


class ComparisonSeries(BaseModel):
    """One metric across all candidates, keyed "salary0".."salary3"."""
    model_config = ConfigDict(extra="forbid")

    name: str                    # "Gross Salary", "Taxable Income", ...
    values: Dict[str, float]


class ComparisonResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    results: List[TaxResults]
    labels: List[str]            # "Salary 1: 12.00 LPA" / "Salary 2: N/A"
    series: List[ComparisonSeries]


# ---------------------------------------------------------------------------
# Hike impact
# ---------------------------------------------------------------------------

class HikeImpactRow(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hike_percentage: int
    new_gross_salary: float
    new_monthly_in_hand: float
    monthly_increase: float      # Over the base salary's monthly in-hand


class HikeImpactTable(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_gross_salary: float
    base_monthly_in_hand: float
    rows: List[HikeImpactRow]


# ---------------------------------------------------------------------------
# POST /api/calculate response
# ---------------------------------------------------------------------------

class CalculationResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    results: TaxResults
    table: List[TableRow]
    advisory: Optional[str] = None   # Basic pay floor message, if it applied


__all__ = [
    "TableRow",
    "SlabExplainerRow",
    "ChartSlice",
    "ChartData",
    "ComparisonRequest",
    "ComparisonSeries",
    "ComparisonResult",
    "HikeImpactRow",
    "HikeImpactTable",
    "CalculationResponse",
    "MIN_COMPARISON_SALARIES",
    "MAX_COMPARISON_SALARIES",
]
