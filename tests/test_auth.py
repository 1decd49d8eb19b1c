"""Tests for authentication functionality."""

import pytest
from fastapi.testclient import TestClient

from first_host.auth import validate_api_key
from first_host.main import app


class TestValidateApiKey:
    """Tests for validate_api_key."""

    def test_valid_key(self):
        assert validate_api_key("key-1", ["key-1", "key-2"]) is True

    def test_unknown_key(self):
        assert validate_api_key("key-3", ["key-1", "key-2"]) is False

    def test_none_and_empty(self):
        assert validate_api_key(None, ["key-1"]) is False
        assert validate_api_key("", ["key-1"]) is False
        assert validate_api_key("   ", ["key-1"]) is False

    def test_surrounding_whitespace_stripped(self):
        assert validate_api_key("  key-1  ", ["key-1"]) is True

    def test_case_sensitive(self):
        assert validate_api_key("KEY-1", ["key-1"]) is False


class TestNoAuthMode:
    """Tests for AUTH_METHOD=none."""

    @pytest.fixture(autouse=True)
    def setup_env(self, monkeypatch):
        monkeypatch.setenv("AUTH_METHOD", "none")

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_no_auth_allows_all_requests(self, client):
        response = client.post("/api/v1/ipv4/first-host", json={"cidr": "192.168.1.0/24"})
        assert response.status_code == 200

    def test_no_auth_ignores_api_key_header(self, client):
        response = client.post(
            "/api/v1/ipv4/first-host",
            json={"cidr": "192.168.1.0/24"},
            headers={"X-API-Key": "invalid-key"},
        )
        assert response.status_code == 200


class TestAPIKeyMode:
    """Tests for AUTH_METHOD=api_key."""

    @pytest.fixture(autouse=True)
    def setup_env(self, monkeypatch):
        monkeypatch.setenv("AUTH_METHOD", "api_key")
        monkeypatch.setenv("API_KEYS", "test-key-123,test-key-456")

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_missing_api_key_returns_401(self, client):
        response = client.post("/api/v1/ipv4/first-host", json={"cidr": "192.168.1.0/24"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or missing API key"

    def test_invalid_api_key_returns_401(self, client):
        response = client.post(
            "/api/v1/ipv4/first-host",
            json={"cidr": "192.168.1.0/24"},
            headers={"X-API-Key": "invalid-key"},
        )
        assert response.status_code == 401

    def test_multiple_valid_keys_all_work(self, client):
        for key in ["test-key-123", "test-key-456"]:
            response = client.post(
                "/api/v1/ipv4/first-host",
                json={"cidr": "192.168.1.0/24"},
                headers={"X-API-Key": key},
            )
            assert response.status_code == 200

    def test_health_endpoint_requires_no_auth(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_docs_endpoint_requires_no_auth(self, client):
        response = client.get("/api/v1/docs")
        assert response.status_code == 200

    def test_whitespace_api_key_returns_401(self, client):
        response = client.post(
            "/api/v1/ipv4/first-host",
            json={"cidr": "192.168.1.0/24"},
            headers={"X-API-Key": "   "},
        )
        assert response.status_code == 401
