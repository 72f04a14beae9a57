import pytest
from fastapi.testclient import TestClient

from state_law_guidance.api.app import app


@pytest.fixture(scope="module")
def client():
    # Entering the context runs the lifespan, which loads the bundled catalog
    with TestClient(app) as c:
        yield c


def test_openapi_contains_routes(client):
    resp = client.get("/openapi.json")
    assert resp.status_code == 200
    paths = resp.json().get("paths", {})
    for path in (
        "/api/_healthz",
        "/api/jurisdictions",
        "/api/jurisdictions/{code}",
        "/api/differences",
        "/api/differences/critical",
        "/api/notifications/state-change",
        "/api/templates/{kind}",
        "/api/documents/{kind}",
    ):
        assert path in paths


def test_healthz(client):
    resp = client.get("/api/_healthz")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["has_catalog"] is True
    assert body["jurisdictions"] == 50
    assert resp.headers.get("x-request-id")


def test_request_id_is_echoed(client):
    resp = client.get("/api/_healthz", headers={"x-request-id": "abc123"})
    assert resp.headers["x-request-id"] == "abc123"


class TestJurisdictions:
    def test_list(self, client):
        body = client.get("/api/jurisdictions").json()
        assert body["catalog_version"] == "2024.1"
        assert len(body["jurisdictions"]) == 50

    def test_list_by_region(self, client):
        body = client.get("/api/jurisdictions", params={"region": "West"}).json()
        codes = {j["code"] for j in body["jurisdictions"]}
        assert "CA" in codes
        assert all(j["region"] == "West" for j in body["jurisdictions"])

    def test_get_one(self, client):
        body = client.get("/api/jurisdictions/CA").json()
        assert body["name"] == "California"
        assert body["law_count"] > 0

    def test_unknown_is_404(self, client):
        resp = client.get("/api/jurisdictions/ZZ")
        assert resp.status_code == 404
        body = resp.json()
        assert body["error"] == "The requested resource was not found."
        assert "request_id" in body

    def test_laws_unknown_code_is_empty(self, client):
        resp = client.get("/api/jurisdictions/ZZ/laws")
        assert resp.status_code == 200
        assert resp.json()["laws"] == []

    def test_laws_category_filter(self, client):
        body = client.get("/api/jurisdictions/CA/laws", params={"category": "EMPLOYMENT"}).json()
        assert body["laws"]
        assert {law["category"] for law in body["laws"]} == {"Employment"}

    def test_laws_bad_category_is_422(self, client):
        resp = client.get("/api/jurisdictions/CA/laws", params={"category": "Parking"})
        assert resp.status_code == 422
        assert "Invalid category" in resp.json()["detail"]


def test_search(client):
    body = client.get(
        "/api/laws/search", params={"q": "minimum wage", "jurisdiction": ["CA", "TX"]}
    ).json()
    assert body["total"] == len(body["results"])
    assert {hit["jurisdiction"] for hit in body["results"]} == {"CA", "TX"}


class TestDifferences:
    def test_ca_to_tx(self, client):
        body = client.get("/api/differences", params={"from_code": "CA", "to_code": "TX"}).json()
        assert body["total"] == len(body["differences"])
        first = body["differences"][0]
        assert first["law_title"] == "Rent Control"
        assert first["importance"] == 4
        importances = [d["importance"] for d in body["differences"]]
        assert importances == sorted(importances, reverse=True)

    def test_category_filter(self, client):
        body = client.get(
            "/api/differences",
            params={"from_code": "CA", "to_code": "TX", "category": "EMPLOYMENT"},
        ).json()
        wage = next(d for d in body["differences"] if d["law_title"] == "Minimum Wage")
        assert wage["from_value"] == "$16.00/hour"
        assert wage["to_value"] == "$7.25/hour"

    def test_unknown_code_is_empty(self, client):
        body = client.get("/api/differences", params={"from_code": "CA", "to_code": "ZZ"}).json()
        assert body["differences"] == []

    def test_critical_default_limit(self, client):
        body = client.get(
            "/api/differences/critical", params={"from_code": "CA", "to_code": "TX"}
        ).json()
        assert [d["law_title"] for d in body["differences"]] == [
            "Rent Control",
            "Minimum Wage",
            "State Income Tax",
        ]

    def test_critical_limit(self, client):
        body = client.get(
            "/api/differences/critical",
            params={"from_code": "CA", "to_code": "WI", "limit": 1},
        ).json()
        assert body["total"] == 1

    def test_negative_limit_rejected(self, client):
        resp = client.get(
            "/api/differences/critical",
            params={"from_code": "CA", "to_code": "WI", "limit": -1},
        )
        assert resp.status_code == 422


def test_state_change_notification(client):
    body = client.get(
        "/api/notifications/state-change", params={"from_code": "CA", "to_code": "TX"}
    ).json()
    assert body["title"] == "Welcome to Texas!"
    assert body["user_info"] == {"state": "TX"}
    assert body["body"].endswith("Tap to see all law differences in Texas.")


class TestTemplates:
    def test_list(self, client):
        body = client.get("/api/templates").json()
        assert len(body) == 18
        receipt = next(t for t in body if t["kind"] == "RENT_RECEIPT")
        assert receipt["identifier"] == "rentReceipt"
        assert receipt["title"] == "Rent Receipt"

    def test_detail_by_identifier(self, client):
        body = client.get("/api/templates/rentReceipt").json()
        assert body["kind"] == "RENT_RECEIPT"
        assert body["fields"][1] == {"name": "tenantName", "placeholder_text": "[Tenant Name]"}

    def test_unknown_kind_is_422(self, client):
        resp = client.get("/api/templates/rentalApplication")
        assert resp.status_code == 422
        assert resp.json()["error"] == "The request data is invalid. Please check your input."


class TestDocuments:
    def test_render_json(self, client):
        resp = client.post(
            "/api/documents/RENT_RECEIPT",
            json={
                "field_values": {"tenantName": "Jane Doe", "amount": "1200", "color": "blue"},
                "jurisdiction_name": "California",
            },
        )
        assert resp.status_code == 200
        body = resp.json()
        texts = [block["text"] for block in body["body_blocks"]]
        assert body["template_kind"] == "RENT_RECEIPT"
        assert body["page_count"] == 1
        assert body["ignored_fields"] == ["color"]
        assert "Received From: Jane Doe" in texts
        assert "Payment Period: [Month/Year]" in texts
        assert texts[2] == "State: California"
        assert body["body_blocks"][0]["style"] == "heading"

    def test_render_text(self, client):
        resp = client.post(
            "/api/documents/leaseAgreement",
            params={"format": "text"},
            json={"field_values": {"tenantName": "Jane Doe"}, "jurisdiction_name": "Oregon"},
        )
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.text.startswith("Lease Agreement\nDate: ")
        assert "Name: Jane Doe" in resp.text

    def test_unknown_kind_is_422(self, client):
        resp = client.post(
            "/api/documents/rentalApplication",
            json={"field_values": {}, "jurisdiction_name": "Oregon"},
        )
        assert resp.status_code == 422

    def test_blank_jurisdiction_name_renders(self, client):
        resp = client.post(
            "/api/documents/RENT_RECEIPT",
            json={"field_values": {}, "jurisdiction_name": ""},
        )
        assert resp.status_code == 200
        texts = [block["text"] for block in resp.json()["body_blocks"]]
        assert texts[2] == "State: "

    def test_missing_jurisdiction_is_422(self, client):
        resp = client.post("/api/documents/RENT_RECEIPT", json={"field_values": {}})
        assert resp.status_code == 422
