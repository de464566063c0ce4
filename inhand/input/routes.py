"""
Input-layer HTTP routes — POST /api/parse-salary

Lets the front end run the same salary-text filter the server trusts, so a
value is only ever sent to /api/calculate once it parses here.
"""
from __future__ import annotations

import json
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from inhand.input.schemas import (
    ErrorBody,
    ErrorDetail,
    ErrorResponse,
    ParsedSalary,
    SalaryTextInput,
)
from inhand.input.validator import parse_salary_input

router = APIRouter(prefix="/api", tags=["input"])
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_validation_error_response(violations_json: str, message: str = "Input validation failed") -> JSONResponse:
    """Parse JSON-encoded violations and return standard 422 error envelope."""
    try:
        violations: list[dict] = json.loads(violations_json)
    except (json.JSONDecodeError, ValueError):
        violations = [{"field": None, "issue": violations_json}]
    details = [ErrorDetail(field=v.get("field"), issue=v["issue"]) for v in violations]
    body = ErrorResponse(
        error=ErrorBody(
            code="VALIDATION_ERROR",
            message=message,
            details=details,
        )
    )
    return JSONResponse(status_code=422, content=body.model_dump())


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/parse-salary")
async def parse_salary(body: SalaryTextInput) -> JSONResponse:
    """Convert "12,00,000"-style text into a rupee integer, or 422."""
    try:
        gross_salary = parse_salary_input(body.raw)
    except ValueError as exc:
        return make_validation_error_response(str(exc), message="Salary could not be parsed")

    return JSONResponse(
        status_code=200,
        content=ParsedSalary(gross_salary=gross_salary).model_dump(),
    )
