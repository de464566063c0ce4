"""
Demo salary fixtures for InHand tests — new regime, AY 2025-26

Hand-computed from first principles. Shared by the engine tests and the API
tests so both layers are held to the same figures.

Monetary tolerance: ±₹1 (engine values are unrounded floats).
"""
from __future__ import annotations
from typing import Any

# ---------------------------------------------------------------------------
# ₹12L CTC, default options (50% basic, employee PF only, no gratuity)
# ---------------------------------------------------------------------------
# taxable = 1200000 - 75000 = 1125000
# slab: 5%*400000 + 10%*325000 = 20000 + 32500 = 52500
# cess = 2100, total = 54600
# basic = 600000, employee PF = 36000
# net = 1145400, in-hand = 1109400, per month = 92450
_TWELVE_LAKH: dict[str, Any] = dict(
    inputs=dict(gross_salary=1_200_000),
    expected=dict(
        taxable_income=1_125_000,
        income_tax=52_500,
        cess=2_100,
        total_tax=54_600,
        basic_pay=600_000,
        employee_pf=36_000,
        employer_pf=36_000,
        net_salary=1_145_400,
        in_hand_salary=1_109_400,
        in_hand_salary_per_month=92_450,
    ),
)

# ---------------------------------------------------------------------------
# ₹4.75L CTC — taxable lands exactly on the 4L boundary, zero tax
# ---------------------------------------------------------------------------
# basic = 237500, employee PF = 14250, in-hand = 475000 - 14250 = 460750
_BOUNDARY_4L: dict[str, Any] = dict(
    inputs=dict(gross_salary=475_000),
    expected=dict(
        taxable_income=400_000,
        income_tax=0,
        cess=0,
        total_tax=0,
        basic_pay=237_500,
        employee_pf=14_250,
        employer_pf=14_250,
        net_salary=475_000,
        in_hand_salary=460_750,
        in_hand_salary_per_month=38_395.83,
    ),
)

# ---------------------------------------------------------------------------
# ₹30.75L CTC, employer PF inside CTC, gratuity considered
# ---------------------------------------------------------------------------
# taxable = 3000000
# slab: 20000+40000+60000+80000+100000+30%*600000 = 480000
# cess = 19200, total = 499200
# basic = 1537500, PF = 92250 each, gratuity = 1537500*0.0481 = 73953.75
# net = 3075000 - 499200 - 73953.75 = 2501846.25
# in-hand = 2501846.25 - 184500 = 2317346.25, per month = 193112.19
_THIRTY_LAKH_FULL: dict[str, Any] = dict(
    inputs=dict(gross_salary=3_075_000, employer_pf_included=True, consider_gratuity=True),
    expected=dict(
        taxable_income=3_000_000,
        income_tax=480_000,
        cess=19_200,
        total_tax=499_200,
        basic_pay=1_537_500,
        employee_pf=92_250,
        employer_pf=92_250,
        net_salary=2_501_846.25,
        in_hand_salary=2_317_346.25,
        in_hand_salary_per_month=193_112.19,
    ),
)

DEMO_SALARIES: dict[str, dict[str, Any]] = {
    "twelve_lakh": _TWELVE_LAKH,
    "boundary_4l": _BOUNDARY_4L,
    "thirty_lakh_full": _THIRTY_LAKH_FULL,
}
