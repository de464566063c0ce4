"""
Report HTTP routes — POST /api/compare,
                      POST /api/hike-impact,
                      POST /api/report/text,
                      POST /api/report/pdf

Reports are generated on demand from the request body and streamed back;
nothing is stored between calls.
"""
from __future__ import annotations

import logging
from io import BytesIO

from fastapi import APIRouter
from fastapi.responses import JSONResponse, StreamingResponse

from inhand.engine.schemas import TaxInputs
from inhand.engine.tax_engine import calculate_tax_for_inputs
from inhand.input.routes import make_validation_error_response
from inhand.reports.comparison import compare_from_request
from inhand.reports.hike_impact import build_hike_impact
from inhand.reports.pdf_generator import generate_pdf_report
from inhand.reports.schemas import ComparisonRequest
from inhand.reports.text_report import generate_text_report, report_filename

router = APIRouter(prefix="/api", tags=["reports"])
logger = logging.getLogger(__name__)


@router.post("/compare")
async def compare(request_body: ComparisonRequest) -> JSONResponse:
    """Side-by-side results for 2-4 salaries with shared options."""
    try:
        result = compare_from_request(request_body)
    except ValueError as exc:
        return make_validation_error_response(str(exc), message="Comparison request invalid")
    return JSONResponse(status_code=200, content=result.model_dump(mode="json"))


@router.post("/hike-impact")
async def hike_impact(inputs: TaxInputs) -> JSONResponse:
    """Monthly in-hand for 5%..50% hikes on gross_salary."""
    table = build_hike_impact(inputs)
    return JSONResponse(status_code=200, content=table.model_dump(mode="json"))


@router.post("/report/text")
async def export_text(inputs: TaxInputs) -> StreamingResponse:
    """Download the plain-text tax report."""
    results = calculate_tax_for_inputs(inputs)
    report = generate_text_report(results)
    filename = report_filename(results, "txt")
    logger.info("Text report exported filename=%s", filename)

    return StreamingResponse(
        BytesIO(report.encode("utf-8")),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/report/pdf")
async def export_pdf(inputs: TaxInputs) -> StreamingResponse:
    """Download the formatted PDF tax report."""
    results = calculate_tax_for_inputs(inputs)
    buffer = generate_pdf_report(results)
    filename = report_filename(results, "pdf")
    logger.info("PDF exported filename=%s", filename)

    return StreamingResponse(
        buffer,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
