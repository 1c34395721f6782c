"""Tests for health check endpoints."""

from fastapi.testclient import TestClient

from api import app
from shared.config import Settings, get_settings


client = TestClient(app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self):
        response = client.get("/api/health")
        assert set(response.json().keys()) == {"status", "version"}

    def test_readiness_when_configured(self):
        app.dependency_overrides[get_settings] = lambda: Settings(
            _env_file=None,
            supabase_url="https://test.supabase.co",
            supabase_service_role_key="key",
            supabase_jwt_secret="secret",
        )
        try:
            response = client.get("/api/ready")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "store": "configured", "auth": "configured"}

    def test_readiness_when_unconfigured(self):
        app.dependency_overrides[get_settings] = lambda: Settings(
            _env_file=None,
            supabase_url="",
            supabase_service_role_key="",
            supabase_jwt_secret="",
        )
        try:
            response = client.get("/api/ready")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200
        assert response.json() == {"status": "not_ready", "store": "missing", "auth": "missing"}
