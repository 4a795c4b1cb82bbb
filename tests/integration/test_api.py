"""Integration tests for API endpoints"""

import re

import pytest
from fastapi.testclient import TestClient

from noel_solidarite.api.main import create_app
from noel_solidarite.infrastructure.storage.repository import InMemoryDonationRepository

DONATION_ID_PATTERN = re.compile(r"^DON-\d+-[a-z0-9]+$")


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["timestamp"]


def test_metrics_endpoint(client: TestClient, donation_payload):
    """Test Prometheus metrics endpoint"""
    client.post("/api/donations", json=donation_payload)

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "noel_donation_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/api/health")
    assert response.headers["X-Request-ID"]


def test_create_donation(client: TestClient, donation_payload):
    """Test POST /api/donations with a valid donation"""
    before = client.get("/api/stats").json()

    response = client.post("/api/donations", json=donation_payload)

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Donation submitted successfully"
    assert DONATION_ID_PATTERN.match(data["donationId"])

    donation = data["donation"]
    assert donation["id"] == data["donationId"]
    assert donation["status"] == "pending"
    assert donation["amount"] == 20
    assert donation["donationType"] == "ponctuel"
    assert donation["cause"] == "lutte-precarite"
    assert donation["donor"]["lastName"] == "Dupont"
    assert donation["donor"]["zipCode"] == "75001"
    assert donation["donor"]["country"] == "France"
    assert donation["payment"] == {"method": "card", "coverFees": False}
    assert donation["createdAt"]

    after = client.get("/api/stats").json()
    assert after["totalDonations"] == before["totalDonations"] + 1
    assert after["totalAmount"] == before["totalAmount"] + 20


def test_get_donation_by_id(client: TestClient, donation_payload):
    """Test GET /api/donations/{id} returns the stored record"""
    created = client.post("/api/donations", json=donation_payload).json()

    response = client.get(f"/api/donations/{created['donationId']}")

    assert response.status_code == 200
    assert response.json() == created["donation"]


def test_get_unknown_donation(client: TestClient):
    response = client.get("/api/donations/DON-0-nothere")

    assert response.status_code == 404
    assert response.json() == {"error": "Donation not found"}


def test_identical_submissions_get_distinct_ids(client: TestClient, donation_payload):
    first = client.post("/api/donations", json=donation_payload).json()
    second = client.post("/api/donations", json=donation_payload).json()

    assert first["donationId"] != second["donationId"]
    assert client.get("/api/stats").json()["totalDonations"] == 2


@pytest.mark.parametrize("amount", [0, 0.99, -5])
def test_invalid_amount_rejected(client: TestClient, donation_payload, amount):
    """Amounts below 1 are refused and nothing is stored"""
    donation_payload["amount"] = amount

    response = client.post("/api/donations", json=donation_payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid amount"}
    assert client.get("/api/stats").json()["totalDonations"] == 0


def test_missing_amount_rejected(client: TestClient, donation_payload):
    del donation_payload["amount"]

    response = client.post("/api/donations", json=donation_payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid amount"}


def test_missing_body_rejected(client: TestClient):
    response = client.post("/api/donations")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid amount"}


@pytest.mark.parametrize("field", ["email", "lastName", "firstName"])
def test_missing_required_fields(client: TestClient, donation_payload, field):
    del donation_payload[field]

    response = client.post("/api/donations", json=donation_payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}
    assert client.get("/api/stats").json()["totalDonations"] == 0


def test_invalid_amount_takes_precedence(client: TestClient, donation_payload):
    donation_payload["amount"] = 0
    donation_payload["email"] = ""

    response = client.post("/api/donations", json=donation_payload)

    assert response.json() == {"error": "Invalid amount"}


def test_invalid_zip_code(client: TestClient, donation_payload):
    donation_payload["zipCode"] = "7500"

    response = client.post("/api/donations", json=donation_payload)

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Invalid donation data"
    assert [detail["field"] for detail in data["details"]] == ["zipCode"]
    assert client.get("/api/stats").json()["totalDonations"] == 0


def test_unknown_field_rejected(client: TestClient, donation_payload):
    """Caller-supplied id or status never reach the store"""
    donation_payload["status"] = "confirmed"

    response = client.post("/api/donations", json=donation_payload)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid donation data"


def test_malformed_json_rejected(client: TestClient):
    response = client.post(
        "/api/donations",
        content=b'{"amount": 20,',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid donation data"


def test_empty_stats(client: TestClient):
    response = client.get("/api/stats")

    assert response.status_code == 200
    assert response.json() == {
        "totalDonations": 0,
        "totalAmount": 0,
        "averageDonation": 0,
        "byType": {"ponctuel": 0, "regulier": 0},
        "byCause": {},
    }


def test_stats_breakdowns(client: TestClient, donation_payload):
    """Test GET /api/stats after several donations"""
    client.post("/api/donations", json={**donation_payload, "amount": 20})
    client.post("/api/donations", json={**donation_payload, "amount": 50, "donationType": "regulier"})
    client.post("/api/donations", json={**donation_payload, "amount": 100, "cause": "kit-scolaire"})

    data = client.get("/api/stats").json()

    assert data["totalDonations"] == 3
    assert data["totalAmount"] == 170
    assert data["averageDonation"] == 56.67
    assert data["byType"] == {"ponctuel": 2, "regulier": 1}
    assert data["byCause"] == {"lutte-precarite": 2, "kit-scolaire": 1}


def test_apps_do_not_share_stores(donation_payload):
    first = TestClient(create_app(repository=InMemoryDonationRepository()))
    second = TestClient(create_app(repository=InMemoryDonationRepository()))

    first.post("/api/donations", json=donation_payload)

    assert first.get("/api/stats").json()["totalDonations"] == 1
    assert second.get("/api/stats").json()["totalDonations"] == 0


def test_unknown_api_path_is_json_404(client: TestClient):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


class TestSite:
    @pytest.fixture
    def site_client(self, tmp_path, repository):
        (tmp_path / "index.html").write_text("<html>accueil</html>", encoding="utf-8")
        (tmp_path / "logo.svg").write_text("<svg></svg>", encoding="utf-8")
        return TestClient(create_app(repository=repository, static_dir=tmp_path))

    def test_root_serves_index(self, site_client):
        response = site_client.get("/")
        assert response.status_code == 200
        assert "accueil" in response.text

    def test_existing_asset_served(self, site_client):
        response = site_client.get("/logo.svg")
        assert response.status_code == 200
        assert response.text == "<svg></svg>"

    def test_client_route_falls_back_to_index(self, site_client):
        response = site_client.get("/merci/pour/tout")
        assert response.status_code == 200
        assert "accueil" in response.text

    def test_missing_index_is_404(self, tmp_path, repository):
        client = TestClient(create_app(repository=repository, static_dir=tmp_path / "absent"))
        assert client.get("/").status_code == 404


def test_inbound_request_id_kept(client: TestClient):
    response = client.get("/api/health", headers={"X-Request-ID": "proxy-42"})
    assert response.headers["X-Request-ID"] == "proxy-42"


def test_amount_above_ceiling_rejected(client: TestClient, donation_payload):
    """An overflowing amount is refused and the stats keep working"""
    donation_payload["amount"] = 1e307

    response = client.post("/api/donations", json=donation_payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid amount"}
    stats = client.get("/api/stats")
    assert stats.status_code == 200
    assert stats.json()["totalDonations"] == 0


def test_boolean_amount_rejected(client: TestClient, donation_payload):
    donation_payload["amount"] = True

    response = client.post("/api/donations", json=donation_payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid amount"}


class BrokenAppendRepository(InMemoryDonationRepository):
    def append(self, record):
        raise RuntimeError("disk on fire")


class BrokenReadRepository(InMemoryDonationRepository):
    def find_by_id(self, donation_id):
        raise RuntimeError("index corrupted")

    def aggregate(self):
        raise RuntimeError("index corrupted")


class TestStoreFailures:
    """Unexpected store errors become a 500 with a generic body"""

    def test_failed_append_leaves_store_untouched(self, donation_payload):
        repository = BrokenAppendRepository()
        client = TestClient(create_app(repository=repository), raise_server_exceptions=False)

        response = client.post("/api/donations", json=donation_payload)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert repository.aggregate().total_donations == 0

    def test_stats_store_failure(self):
        client = TestClient(create_app(repository=BrokenReadRepository()), raise_server_exceptions=False)

        response = client.get("/api/stats")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_get_by_id_store_failure(self):
        client = TestClient(create_app(repository=BrokenReadRepository()), raise_server_exceptions=False)

        response = client.get("/api/donations/DON-1-abc")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
