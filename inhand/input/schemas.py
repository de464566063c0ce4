"""
schemas.py — Input-layer Pydantic v2 data contracts.

Defines:
  - SalaryTextInput         (raw text typed into a salary box)
  - ParsedSalary            (result of parsing it)
  - ErrorDetail, ErrorBody, ErrorResponse  (cross-cutting error envelope)
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Salary text parsing contracts
# ---------------------------------------------------------------------------

class SalaryTextInput(BaseModel):
    """Raw salary string exactly as typed, e.g. "12,00,000"."""
    model_config = ConfigDict(extra="forbid")

    raw: str = Field(
        ...,
        max_length=32,
        description="Digits, optionally grouped with commas (Indian or international).",
    )


class ParsedSalary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    gross_salary: int


# ---------------------------------------------------------------------------
# Error response models — used by main.py exception handlers (cross-cutting)
# ---------------------------------------------------------------------------

class ErrorDetail(BaseModel):
    """Single field-level validation error."""
    model_config = ConfigDict(extra="forbid")

    field: Optional[str] = None   # Dot-notation field path, e.g. "gross_salary"
    issue: str                     # Human-readable description of the problem


class ErrorBody(BaseModel):
    """Error envelope body."""
    model_config = ConfigDict(extra="forbid")

    code: str                                      # VALIDATION_ERROR, NOT_FOUND, etc.
    message: str                                   # High-level error description
    details: List[ErrorDetail] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """
    Standard error response format for all InHand endpoints.

    Structure: {"error": {"code": "...", "message": "...", "details": [...]}}
    """
    model_config = ConfigDict(extra="forbid")

    error: ErrorBody


__all__ = [
    "SalaryTextInput",
    "ParsedSalary",
    "ErrorDetail",
    "ErrorBody",
    "ErrorResponse",
]
