"""
End-to-end API tests for the InHand HTTP surface

Tests the full stack: HTTP request → schema validation → tax engine →
consumer rendering → HTTP response. Nothing is persisted, so no external
services are needed.

Run from the repo root: pytest inhand/tests/test_api.py -v

Expected figures come from demo_salaries.py (shared with test_tax_engine.py).
Tolerance: ±₹1 on monetary assertions.
"""
from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from inhand.main import app
from inhand.tests.demo_salaries import DEMO_SALARIES


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def client():
    """Async httpx client using ASGI transport — no live server needed."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ---------------------------------------------------------------------------
# Test Group 1: POST /api/calculate
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize("name", list(DEMO_SALARIES))
async def test_calculate_demo_salaries(client: AsyncClient, name: str) -> None:
    data = DEMO_SALARIES[name]
    response = await client.post("/api/calculate", json=data["inputs"])
    assert response.status_code == 200, (
        f"{name}: Expected 200, got {response.status_code}. Body: {response.text}"
    )

    body = response.json()
    results = body["results"]
    for field, expected in data["expected"].items():
        assert abs(results[field] - expected) <= 1, (
            f"{name}: {field} expected ₹{expected:,.2f}, got ₹{results[field]:,.2f}"
        )

    assert body["advisory"] is None
    assert body["table"][-1]["label"] == "In-hand Salary Per Year"
    assert body["table"][-1]["final"] is True


@pytest.mark.asyncio
async def test_calculate_response_shape(client: AsyncClient) -> None:
    response = await client.post("/api/calculate", json={"gross_salary": 1_200_000})
    results = response.json()["results"]

    assert results["standard_deduction"] == 75_000
    assert results["pf_policy"] == "basic_pay"
    assert results["employer_pf_included"] is False
    assert [s["label"] for s in results["slab_breakdown"]] == [
        "0-4L", "4L-8L", "8L-12L", "12L-16L", "16L-20L", "20L-24L", "Above 24L",
    ]
    assert results["slab_breakdown"][-1]["upper"] is None
    assert results["effective_tax_rate"] == pytest.approx(4.55)


@pytest.mark.asyncio
async def test_calculate_low_basic_pay_returns_advisory(client: AsyncClient) -> None:
    response = await client.post(
        "/api/calculate",
        json={"gross_salary": 1_200_000, "basic_pay_percentage": 30},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["results"]["basic_pay_percentage"] == 50
    assert body["results"]["employee_pf"] == pytest.approx(36_000)
    assert "30% was requested" in body["advisory"]


@pytest.mark.asyncio
async def test_calculate_flat_gross_policy(client: AsyncClient) -> None:
    response = await client.post(
        "/api/calculate",
        json={"gross_salary": 1_200_000, "employer_pf_included": True, "pf_policy": "flat_gross"},
    )
    assert response.status_code == 200
    results = response.json()["results"]
    assert results["total_pf_deduction"] == pytest.approx(144_000)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, field",
    [
        ({"gross_salary": -1}, "gross_salary"),
        ({"gross_salary": "twelve lakh"}, "gross_salary"),
        ({"gross_salary": 1_200_000, "basic_pay_percentage": 120}, "basic_pay_percentage"),
        ({"gross_salary": 1_200_000, "pf_policy": "ctc"}, "pf_policy"),
        ({"gross_salary": 1_200_000, "regime": "old"}, "regime"),
        ({}, "gross_salary"),
    ],
)
async def test_calculate_rejects_invalid_inputs(client: AsyncClient, payload: dict, field: str) -> None:
    response = await client.post("/api/calculate", json=payload)
    assert response.status_code == 422, (
        f"Expected 422 for {payload}, got {response.status_code}. Body: {response.text}"
    )
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert field in [d["field"] for d in error["details"]]


# ---------------------------------------------------------------------------
# Test Group 2: chart / slabs
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_chart_endpoint(client: AsyncClient) -> None:
    response = await client.post("/api/chart", json={"gross_salary": 1_200_000})
    assert response.status_code == 200
    body = response.json()
    assert [s["name"] for s in body["slices"]] == ["4L-8L", "8L-12L", "CESS (4%)", "PF (6%)"]
    assert body["total"] == pytest.approx(90_600)


@pytest.mark.asyncio
async def test_slabs_endpoint(client: AsyncClient) -> None:
    response = await client.get("/api/slabs")
    assert response.status_code == 200
    rows = response.json()
    assert len(rows) == 7
    assert rows[0]["rate"] == "0%"
    assert rows[-1]["range"] == "Above ₹24,00,000"


# ---------------------------------------------------------------------------
# Test Group 3: comparison / hike impact
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_compare_endpoint(client: AsyncClient) -> None:
    response = await client.post(
        "/api/compare",
        json={"salaries": [1_200_000, 1_800_000], "employer_pf_included": True},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["labels"] == ["Salary 1: 12.00 LPA", "Salary 2: 18.00 LPA"]
    assert len(body["results"]) == 2
    assert all(r["employer_pf_included"] for r in body["results"])


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "salaries",
    [[1_200_000], [1, 2, 3, 4, 5], [1_200_000, -5]],
)
async def test_compare_rejects_bad_salary_lists(client: AsyncClient, salaries: list) -> None:
    response = await client.post("/api/compare", json={"salaries": salaries})
    assert response.status_code == 422
    details = response.json()["error"]["details"]
    assert any(d["field"].startswith("salaries") for d in details)


@pytest.mark.asyncio
async def test_hike_impact_endpoint(client: AsyncClient) -> None:
    response = await client.post("/api/hike-impact", json={"gross_salary": 1_200_000})
    assert response.status_code == 200
    body = response.json()
    assert body["base_monthly_in_hand"] == pytest.approx(92_450)
    assert [r["hike_percentage"] for r in body["rows"]] == [5, 10, 15, 20, 25, 30, 35, 40, 45, 50]
    assert body["rows"][0]["new_gross_salary"] == pytest.approx(1_260_000)


# ---------------------------------------------------------------------------
# Test Group 4: report downloads
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_text_report_download(client: AsyncClient) -> None:
    response = await client.post("/api/report/text", json={"gross_salary": 1_200_000})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert 'filename="tax-report-1200000.txt"' in response.headers["content-disposition"]
    assert "In-hand Salary Per Month: ₹92,450" in response.text


@pytest.mark.asyncio
async def test_pdf_report_download(client: AsyncClient) -> None:
    response = await client.post(
        "/api/report/pdf",
        json={"gross_salary": 3_075_000, "employer_pf_included": True, "consider_gratuity": True},
    )
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert 'filename="tax-report-3075000.pdf"' in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")


# ---------------------------------------------------------------------------
# Test Group 5: salaries too large to render are rejected, not 500s
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path",
    ["/api/calculate", "/api/chart", "/api/hike-impact", "/api/report/text", "/api/report/pdf"],
)
@pytest.mark.parametrize("gross", ["1e30", "10000000000000", "Infinity", "NaN"])
async def test_out_of_range_gross_returns_422(client: AsyncClient, path: str, gross: str) -> None:
    # Raw body: Infinity/NaN are not valid arguments for httpx's json=
    response = await client.post(
        path,
        content=f'{{"gross_salary": {gross}}}',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 422, (
        f"{path} gross={gross}: Expected 422, got {response.status_code}. Body: {response.text}"
    )
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert "gross_salary" in [d["field"] for d in error["details"]]


@pytest.mark.asyncio
@pytest.mark.parametrize("salary", ["1e30", "Infinity"])
async def test_compare_rejects_out_of_range_salary(client: AsyncClient, salary: str) -> None:
    response = await client.post(
        "/api/compare",
        content=f'{{"salaries": [1200000, {salary}]}}',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 422
    assert "salaries.1" in [d["field"] for d in response.json()["error"]["details"]]


@pytest.mark.asyncio
async def test_largest_accepted_gross_renders_reports(client: AsyncClient) -> None:
    payload = {"gross_salary": 9_999_999_999_999}
    for path in ("/api/calculate", "/api/report/text", "/api/report/pdf"):
        response = await client.post(path, json=payload)
        assert response.status_code == 200, f"{path}: Body: {response.text}"


# ---------------------------------------------------------------------------
# Test Group 6: salary text parsing / system
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw, expected",
    [("12,00,000", 1_200_000), ("1,200,000", 1_200_000), ("", 0)],
)
async def test_parse_salary_endpoint(client: AsyncClient, raw: str, expected: int) -> None:
    response = await client.post("/api/parse-salary", json={"raw": raw})
    assert response.status_code == 200
    assert response.json() == {"gross_salary": expected}


@pytest.mark.asyncio
async def test_parse_salary_endpoint_rejects_decimal(client: AsyncClient) -> None:
    response = await client.post("/api/parse-salary", json={"raw": "12.5"})
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "gross_salary"


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client: AsyncClient) -> None:
    response = await client.get("/api/nope")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
