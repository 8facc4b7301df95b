"""
Integration Tests for FastAPI Backend

Tests for API endpoints: classification, reference data, health checks.
Uses async httpx for ASGI app testing.
"""
import pytest
import httpx

from allrisk.main import app


@pytest.fixture
async def async_client():
    """Create async test client."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client


@pytest.mark.asyncio
class TestHealthEndpoints:
    """Tests for health check endpoints."""

    async def test_root_endpoint(self, async_client):
        response = await async_client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    async def test_health_endpoint(self, async_client):
        response = await async_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
class TestPathwayEndpoint:
    """Tests for Ph-like classification."""

    async def test_empty_gene_list(self, async_client):
        response = await async_client.post("/api/v1/classify/pathway", json={"genes": []})
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "negative"
        assert data["subtype"] is None
        assert data["therapy"] is None

    async def test_abl_class_priority(self, async_client):
        response = await async_client.post(
            "/api/v1/classify/pathway", json={"genes": ["jak2", "abl1"]}
        )
        assert response.status_code == 200

        data = response.json()
        assert data["subtype"] == "ABL-class"
        assert data["therapy"]["name"] == "Dasatinib"

    async def test_blank_gene_rejected(self, async_client):
        response = await async_client.post("/api/v1/classify/pathway", json={"genes": [" "]})
        assert response.status_code == 400
        assert response.json()["error"] == "INPUT_VALIDATION_ERROR"

    async def test_wrong_shape_rejected(self, async_client):
        response = await async_client.post("/api/v1/classify/pathway", json={"genes": "ABL1"})
        assert response.status_code == 422


@pytest.mark.asyncio
class TestStructuralEndpoint:
    """Tests for IKZF1 PLUS classification."""

    async def test_empty_body_is_default(self, async_client):
        response = await async_client.post("/api/v1/classify/structural", json={})
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "neutral"
        assert data["rule_id"] == "DEFAULT"

    async def test_ikzf1_plus_via_par1(self, async_client):
        response = await async_client.post("/api/v1/classify/structural", json={
            "ikzf1_del": True,
            "par1_genes": {"P2RY8": "del"},
        })
        assert response.status_code == 200

        data = response.json()
        assert data["label"] == "IKZF1 PLUS"
        assert "MRD" in data["therapy"]["timing"]

    async def test_erg_overrides(self, async_client):
        response = await async_client.post("/api/v1/classify/structural", json={
            "erg_del": True, "ikzf1_del": True, "cdkn2a_b_del": True,
        })
        assert response.json()["status"] == "negative"

    async def test_unknown_status_rejected(self, async_client):
        response = await async_client.post("/api/v1/classify/structural", json={
            "par1_genes": {"CRLF2": "amp"},
        })
        assert response.status_code == 400
        assert response.json()["details"]["field"] == "par1_genes.CRLF2"

    async def test_unknown_field_rejected(self, async_client):
        response = await async_client.post("/api/v1/classify/structural", json={"tp53_del": True})
        assert response.status_code == 422

    async def test_non_boolean_flag_rejected(self, async_client):
        response = await async_client.post("/api/v1/classify/structural", json={"iamp21": "yes"})
        assert response.status_code == 422

    async def test_null_fields_read_as_absent(self, async_client):
        response = await async_client.post("/api/v1/classify/structural", json={
            "etv6_del": None, "par1_genes": None,
        })
        assert response.status_code == 200
        assert response.json()["rule_id"] == "DEFAULT"

    async def test_null_par1_status_read_as_absent(self, async_client):
        response = await async_client.post("/api/v1/classify/structural", json={
            "ikzf1_del": True, "pax5_del": None, "par1_genes": {"CRLF2": None},
        })
        assert response.status_code == 200
        assert response.json()["rule_id"] == "GEN-PR"


@pytest.mark.asyncio
class TestCombinedEndpoint:
    """Tests for the combined decision."""

    async def test_combined_report(self, async_client):
        response = await async_client.post("/api/v1/classify", json={
            "genes": ["CRLF2"],
            "markers": {"ikzf1_del": True, "pax5_del": True},
        })
        assert response.status_code == 200

        data = response.json()
        assert data["pathway"]["subtype"] == "JAK-STAT"
        assert data["structural"]["label"] == "IKZF1 PLUS"
        assert data["highest_risk"] == "high"
        assert data["structural_matches"][0] == "IKZF1-PLUS"
        assert [r["category"] for r in data["recommendations"]] == [
            "targeted first-line", "pathway adjustment",
        ]

    async def test_defaults(self, async_client):
        response = await async_client.post("/api/v1/classify", json={})
        assert response.status_code == 200
        assert response.json()["recommendations"][0]["category"] == "standard protocol"

    async def test_null_markers(self, async_client):
        response = await async_client.post("/api/v1/classify", json={
            "genes": ["JAK2"], "markers": None,
        })
        assert response.status_code == 200

        data = response.json()
        assert data["structural"]["rule_id"] == "DEFAULT"
        assert data["highest_risk"] == "intermediate/high"

    async def test_ph_like_with_etv6_gets_no_standard_line(self, async_client):
        response = await async_client.post("/api/v1/classify", json={
            "genes": ["ABL1"], "markers": {"etv6_del": True},
        })
        assert response.status_code == 200

        categories = [r["category"] for r in response.json()["recommendations"]]
        assert categories == ["targeted first-line", "pathway adjustment"]


@pytest.mark.asyncio
class TestReferenceEndpoints:
    """Tests for catalog and reference data."""

    async def test_gene_catalog(self, async_client):
        response = await async_client.get("/api/v1/genes")
        assert response.status_code == 200

        groups = response.json()["groups"]
        assert [g["id"] for g in groups] == ["jak_stat", "abl_class", "other"]
        assert "NTRK" in groups[2]["genes"]

    async def test_rules(self, async_client):
        data = (await async_client.get("/api/v1/rules")).json()

        assert len(data["rules"]) == 8
        assert data["shadowed"] == ["IKZF1-BTG1", "IKZF1-SIMPLE"]

    async def test_marker_reference(self, async_client):
        data = (await async_client.get("/api/v1/reference/markers")).json()

        assert "iamp21" in data["markers"]
        assert len(data["sources"]) == 3

    async def test_single_marker(self, async_client):
        response = await async_client.get("/api/v1/reference/markers/erg_del")
        assert response.status_code == 200
        assert response.json()["marker_id"] == "erg_del"

    async def test_unknown_marker_returns_404(self, async_client):
        response = await async_client.get("/api/v1/reference/markers/NONEXISTENT")
        assert response.status_code == 404
        assert response.json()["error"] == "UNKNOWN_MARKER"


@pytest.mark.asyncio
class TestAPIDocumentation:
    """Tests for API documentation availability."""

    async def test_docs_endpoint(self, async_client):
        response = await async_client.get("/docs")
        assert response.status_code == 200

    async def test_openapi_schema(self, async_client):
        response = await async_client.get("/openapi.json")
        assert response.status_code == 200
        assert "/api/v1/classify" in response.json()["paths"]
