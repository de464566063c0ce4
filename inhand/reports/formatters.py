"""
formatters.py — display formatting for rupee amounts.

  format_currency(1200000)  -> "₹12,00,000"   (Indian lakh/crore grouping)
  format_lpa(1200000)       -> "12.00 LPA"     (lakhs per annum)

Engine values are unrounded floats; this is the only place they get rounded.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

RUPEE = "₹"
LAKH = 100_000


def _round_rupees(amount: float) -> int:
    """Round half away from zero to whole rupees."""
    return int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def group_indian(value: int) -> str:
    """
    Group digits the Indian way: last three, then pairs.

    1234567 -> "12,34,567"
    """
    digits = str(abs(value))
    if len(digits) <= 3:
        grouped = digits
    else:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        grouped = ",".join(pairs + [tail])
    return f"-{grouped}" if value < 0 else grouped


def format_currency(amount: float) -> str:
    """Format as Indian rupees with no decimals, e.g. ₹1,09,400."""
    rounded = _round_rupees(amount)
    if rounded < 0:
        return f"-{RUPEE}{group_indian(-rounded)}"
    return f"{RUPEE}{group_indian(rounded)}"


def format_lpa(amount: float) -> str:
    """Format as lakhs per annum with two decimals, e.g. 12.00 LPA."""
    return f"{amount / LAKH:.2f} LPA"


def format_percent(rate: float) -> str:
    """0.05 -> "5%", 0.0481 -> "4.81%"."""
    return f"{rate * 100:g}%"
