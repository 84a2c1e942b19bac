"""GET /api/v1/search: parameter handling, error codes, response envelope."""

import json
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from app.api.v1.dependencies import get_search_service
from app.application.dtos.search import SearchResponse
from app.domain.exceptions import SearchFailedException, SearchTimeoutException
from app.main import app

ORG_HEADER = "X-Organization-ID"


@pytest.fixture
def org_a_headers(seeded) -> dict[str, str]:
    return {ORG_HEADER: seeded["org_a"]}


@pytest.fixture
def stub_service():
    """SearchService stand-in recording the SearchQuery it receives."""
    service = AsyncMock()
    service.search = AsyncMock(
        return_value=SearchResponse(
            results=[], total=0, page=1, page_size=20, query_time=0.1
        )
    )
    app.dependency_overrides[get_search_service] = lambda: service
    return service


class TestSuccess:
    async def test_fraud_search_envelope(self, client: AsyncClient, org_a_headers) -> None:
        response = await client.get(
            "/api/v1/search", params={"q": "fraud"}, headers=org_a_headers
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["total"] == 2
        assert body["page"] == 1
        assert body["pageSize"] == 20
        assert body["queryTime"] >= 0
        first = body["data"][0]
        assert first["entityType"] == "ai_system"
        assert first["title"] == "Fraud Detection Model"
        assert first["snippet"] == "Detects <mark>fraud</mark>"
        assert first["relevance"] == pytest.approx(80.0)
        assert first["metadata"]["riskTier"] == "HIGH"
        assert body["data"][1]["entityType"] == "risk"

    async def test_type_param_limits_entity_types(
        self, client: AsyncClient, org_a_headers
    ) -> None:
        response = await client.get(
            "/api/v1/search",
            params={"q": "fraud", "type": "risk,unknown"},
            headers=org_a_headers,
        )
        assert response.status_code == 200
        assert [r["entityType"] for r in response.json()["data"]] == ["risk"]

    async def test_filters_param_applied(self, client: AsyncClient, org_a_headers) -> None:
        response = await client.get(
            "/api/v1/search",
            params={"q": "fraud", "filters": json.dumps({"riskTier": "LOW"})},
            headers=org_a_headers,
        )
        assert response.status_code == 200
        assert [r["entityType"] for r in response.json()["data"]] == ["risk"]

    async def test_other_organization_results_never_leak(
        self, client: AsyncClient, seeded
    ) -> None:
        response = await client.get(
            "/api/v1/search",
            params={"q": "fraud"},
            headers={ORG_HEADER: seeded["org_b"]},
        )
        assert response.status_code == 200
        ids = [r["id"] for r in response.json()["data"]]
        assert ids == [seeded["ai_system_b"]]


class TestPagingParams:
    @pytest.mark.parametrize(
        "params,expected_page,expected_size",
        [
            ({}, 1, 20),
            ({"page": "0", "pageSize": "0"}, 1, 1),
            ({"page": "-3", "pageSize": "500"}, 1, 100),
            ({"page": "4", "pageSize": "25"}, 4, 25),
        ],
    )
    async def test_page_and_page_size_clamped(
        self,
        client: AsyncClient,
        org_a_headers,
        stub_service,
        params,
        expected_page,
        expected_size,
    ) -> None:
        response = await client.get(
            "/api/v1/search", params={"q": "fraud", **params}, headers=org_a_headers
        )
        assert response.status_code == 200
        options = stub_service.search.await_args.args[0]
        assert options.page == expected_page
        assert options.page_size == expected_size

    async def test_non_integer_page_rejected(
        self, client: AsyncClient, org_a_headers
    ) -> None:
        response = await client.get(
            "/api/v1/search", params={"q": "fraud", "page": "two"}, headers=org_a_headers
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert response.json()["details"]["field"] == "page"


class TestErrors:
    @pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
    async def test_missing_query(self, client: AsyncClient, org_a_headers, params) -> None:
        response = await client.get("/api/v1/search", params=params, headers=org_a_headers)
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "INVALID_QUERY"

    async def test_query_too_long(self, client: AsyncClient, org_a_headers) -> None:
        response = await client.get(
            "/api/v1/search", params={"q": "x" * 201}, headers=org_a_headers
        )
        assert response.status_code == 400
        assert response.json()["code"] == "QUERY_TOO_LONG"

    async def test_query_at_limit_accepted(self, client: AsyncClient, org_a_headers) -> None:
        response = await client.get(
            "/api/v1/search", params={"q": "x" * 200}, headers=org_a_headers
        )
        assert response.status_code == 200

    async def test_no_valid_entity_type(self, client: AsyncClient, org_a_headers) -> None:
        response = await client.get(
            "/api/v1/search",
            params={"q": "fraud", "type": "policy,vendor"},
            headers=org_a_headers,
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ENTITY_TYPE"

    @pytest.mark.parametrize("raw", ["{not json", "[1, 2]", '"riskTier"'])
    async def test_malformed_filters(self, client: AsyncClient, org_a_headers, raw) -> None:
        response = await client.get(
            "/api/v1/search", params={"q": "fraud", "filters": raw}, headers=org_a_headers
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_FILTERS"

    async def test_invalid_filter_value_names_field(
        self, client: AsyncClient, org_a_headers
    ) -> None:
        response = await client.get(
            "/api/v1/search",
            params={"q": "fraud", "filters": json.dumps({"minResidualScore": "high"})},
            headers=org_a_headers,
        )
        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "INVALID_FILTERS"
        assert body["details"]["field"] == "minResidualScore"

    async def test_missing_organization_header(self, client: AsyncClient, seeded) -> None:
        response = await client.get("/api/v1/search", params={"q": "fraud"})
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    async def test_malformed_organization_header(self, client: AsyncClient, seeded) -> None:
        response = await client.get(
            "/api/v1/search",
            params={"q": "fraud"},
            headers={ORG_HEADER: "org a; drop"},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    async def test_unknown_organization(self, client: AsyncClient, seeded) -> None:
        response = await client.get(
            "/api/v1/search", params={"q": "fraud"}, headers={ORG_HEADER: "org-zzz"}
        )
        assert response.status_code == 400
        assert response.json()["code"] == "ORGANIZATION_NOT_FOUND"

    async def test_search_failure_maps_to_500(
        self, client: AsyncClient, org_a_headers, stub_service
    ) -> None:
        stub_service.search.side_effect = SearchFailedException("evidence", "OperationalError")
        response = await client.get(
            "/api/v1/search", params={"q": "fraud"}, headers=org_a_headers
        )
        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "SEARCH_FAILED"
        assert body["details"]["entity_type"] == "evidence"

    async def test_search_timeout_maps_to_504(
        self, client: AsyncClient, org_a_headers, stub_service
    ) -> None:
        stub_service.search.side_effect = SearchTimeoutException(15.0)
        response = await client.get(
            "/api/v1/search", params={"q": "fraud"}, headers=org_a_headers
        )
        assert response.status_code == 504
        assert response.json()["code"] == "SEARCH_TIMEOUT"
