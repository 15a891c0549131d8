import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid4_when_missing(self, client):
        request_id = client.get("/health")["X-Request-ID"]
        assert uuid.UUID(request_id).version == 4

    def test_echoed_on_api_errors(self, api_client_with_correlation):
        api_client, cid = api_client_with_correlation

        response = api_client.get("/api/v1/orders/")

        assert response.status_code == 401
        assert response["X-Request-ID"] == cid

    def test_bound_to_service_logs(self, manager_client, caplog):
        custom_id = "order-flow-correlation-789"
        with caplog.at_level(logging.INFO):
            manager_client.post("/api/v1/orders/", {}, format="json", HTTP_X_REQUEST_ID=custom_id)

        link_logs = [r.getMessage() for r in caplog.records if "order.link_created" in r.getMessage()]
        assert link_logs
        assert all(custom_id in message for message in link_logs)
