from unittest.mock import patch

import pytest

pytestmark = pytest.mark.integration

HEALTH_URL = "/health"


class TestHealthCheck:
    def test_healthy(self, client):
        response = client.get(HEALTH_URL)

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert set(data["services"]) == {"database", "cache"}

    def test_checks_report_response_time(self, client):
        services = client.get(HEALTH_URL).json()["services"]

        for name in ("database", "cache"):
            assert services[name]["status"] == "up"
            assert services[name]["response_time_ms"] >= 0

    def test_cache_down_returns_503(self, client):
        with patch("modules.core.views.cache.set", side_effect=ConnectionError("redis down")):
            response = client.get(HEALTH_URL)

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["services"]["cache"] == {"status": "down"}
        assert data["services"]["database"]["status"] == "up"
