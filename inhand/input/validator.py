"""
Input-layer validation — salary text and basic pay advisory.

The tax engine itself never rejects anything. This module is the boundary that
filters what a person types before a number ever reaches the engine:

  1. parse_salary_input  — digits, optionally comma-grouped, else ValueError
  2. basic_pay_advisory  — soft message when basic pay % is below the 50% floor

Failures raise ValueError with a JSON-encoded list of {field, issue} dicts so
the route (or the global ValueError handler) can build the standard envelope.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Optional

from inhand.engine.schemas import MAX_SALARY_DIGITS
from inhand.engine.tax_engine import MIN_BASIC_PAY_PERCENTAGE

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Accepted salary spellings
# ---------------------------------------------------------------------------
_PLAIN_DIGITS   = re.compile(r"^\d+$")
_INTERNATIONAL  = re.compile(r"^\d{1,3}(,\d{3})+$")          # 1,200,000
_INDIAN         = re.compile(r"^\d{1,2}(,\d{2})*,\d{3}$")     # 12,00,000


def parse_salary_input(raw: str, field: str = "gross_salary") -> int:
    """
    Convert a typed salary string into an integer rupee amount.

    Empty (or whitespace-only) input means "nothing entered yet" and yields 0,
    so a blank form renders zeros rather than an error.

    Args:
        raw: Text as typed, e.g. "1200000", "12,00,000", "1,200,000".
        field: Field name reported in the error detail.

    Raises:
        ValueError: JSON list of {"field", "issue"} when the text is not a
            whole number with optional thousands separators.
    """
    text = (raw or "").strip()
    if text == "":
        return 0

    if not (
        _PLAIN_DIGITS.match(text)
        or _INTERNATIONAL.match(text)
        or _INDIAN.match(text)
    ):
        logger.info("Salary input rejected: not a grouped whole number (len=%d)", len(text))
        raise ValueError(json.dumps([{
            "field": field,
            "issue": (
                "Salary must be a whole number of rupees, optionally grouped with "
                "commas (e.g. 1200000, 12,00,000 or 1,200,000)."
            ),
        }]))

    digits = text.replace(",", "")
    if len(digits.lstrip("0")) > MAX_SALARY_DIGITS:
        raise ValueError(json.dumps([{
            "field": field,
            "issue": f"Salary has more than {MAX_SALARY_DIGITS} digits.",
        }]))

    return int(digits)


def basic_pay_advisory(basic_pay_percentage: Optional[float]) -> Optional[str]:
    """
    Return a user-visible note when basic pay % is below the floor.

    This is a soft check — the engine silently uses 50% and the caller still
    gets a full result; the message just explains why the figure changed.
    """
    if basic_pay_percentage is None or basic_pay_percentage >= MIN_BASIC_PAY_PERCENTAGE:
        return None
    return (
        f"Basic pay cannot be less than {MIN_BASIC_PAY_PERCENTAGE}% of gross salary. "
        f"{basic_pay_percentage:g}% was requested; {MIN_BASIC_PAY_PERCENTAGE}% has been used."
    )
