"""
Tax engine HTTP routes — POST /api/calculate,
                          POST /api/chart,
                          GET  /api/slabs

Every endpoint is a thin wrapper: validate TaxInputs, call the engine once,
render. No tax arithmetic lives here.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from inhand.engine.schemas import TaxInputs
from inhand.engine.tax_engine import calculate_tax_for_inputs
from inhand.input.validator import basic_pay_advisory
from inhand.reports.charts import build_tax_breakdown_chart
from inhand.reports.schemas import CalculationResponse
from inhand.reports.tables import build_results_table, build_slab_explainer

router = APIRouter(prefix="/api", tags=["tax_engine"])
logger = logging.getLogger(__name__)


@router.post("/calculate")
async def calculate(inputs: TaxInputs) -> JSONResponse:
    """
    Calculate tax, PF and in-hand salary for one gross salary.

    A basic pay percentage below 50% is not an error: the engine uses 50% and
    the response carries an `advisory` explaining the substitution.
    """
    results = calculate_tax_for_inputs(inputs)
    advisory = basic_pay_advisory(inputs.basic_pay_percentage)
    if advisory:
        logger.info("Basic pay percentage floored to %.0f%%", results.basic_pay_percentage)

    body = CalculationResponse(
        results=results,
        table=build_results_table(results),
        advisory=advisory,
    )
    logger.info(
        "Tax calculated policy=%s employer_pf=%s gratuity=%s",
        results.pf_policy.value,
        results.employer_pf_included,
        results.consider_gratuity,
    )
    return JSONResponse(status_code=200, content=body.model_dump(mode="json"))


@router.post("/chart")
async def chart(inputs: TaxInputs) -> JSONResponse:
    """Tax breakdown chart slices (slabs with tax, cess, PF)."""
    results = calculate_tax_for_inputs(inputs)
    data = build_tax_breakdown_chart(results)
    return JSONResponse(status_code=200, content=data.model_dump(mode="json"))


@router.get("/slabs")
async def slabs() -> JSONResponse:
    """Static slab explainer rows."""
    rows = build_slab_explainer()
    return JSONResponse(status_code=200, content=[row.model_dump() for row in rows])
