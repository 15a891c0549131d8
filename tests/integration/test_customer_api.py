"""Integration tests for the customer endpoints.

Covers scoping (manager book vs. agent book), validation errors, the
duplicate phone rule, the customer cap and state id masking.
"""

import pytest

pytestmark = pytest.mark.integration

URL = "/api/v1/customers/"


def _detail(customer_id):
    return f"{URL}{customer_id}/"


class TestCreate:
    def test_manager_creates_customer(self, manager_client, manager, customer_payload):
        response = manager_client.post(URL, customer_payload, format="json")

        assert response.status_code == 201
        data = response.json()
        assert data["manager_id"] == str(manager.id)
        assert data["agent_id"] is None
        assert data["state_id"] == "***6789"

    def test_agent_creates_own_customer(self, agent_client, agent, customer_payload):
        response = agent_client.post(URL, customer_payload, format="json")

        assert response.status_code == 201
        assert response.json()["agent_id"] == str(agent.id)

    def test_invalid_state_id(self, manager_client, customer_payload):
        response = manager_client.post(
            URL, {**customer_payload, "state_id": "12345"}, format="json"
        )

        assert response.status_code == 400
        body = response.json()
        assert body["kind"] == "VALIDATION_ERROR"
        assert body["user_message"] == "Customer state ID must be exactly 9 digits"

    def test_duplicate_phone_number(self, manager_client, customer_payload):
        manager_client.post(URL, customer_payload, format="json")

        response = manager_client.post(
            URL, {**customer_payload, "email": "other@example.com"}, format="json"
        )

        assert response.status_code == 400
        assert "913-222-111" in response.json()["technical_message"]

    def test_customer_cap(self, manager_client, customer_payload, settings):
        settings.MAX_CUSTOMER_CAP = 1
        manager_client.post(URL, customer_payload, format="json")

        response = manager_client.post(
            URL, {**customer_payload, "phone_number": "913-222-112"}, format="json"
        )

        assert response.status_code == 400
        body = response.json()
        assert body["kind"] == "CAPACITY_EXCEEDED"
        assert body["user_message"] == "Customer limit reached"
        assert body["severity"] == "WARN"

    def test_cap_is_per_owner(self, manager_client, agent_client, customer_payload, settings):
        settings.MAX_CUSTOMER_CAP = 1
        manager_client.post(URL, customer_payload, format="json")

        response = agent_client.post(
            URL, {**customer_payload, "phone_number": "913-222-112"}, format="json"
        )

        assert response.status_code == 201


class TestReadUpdateDelete:
    @pytest.fixture()
    def customer_id(self, manager_client, customer_payload):
        return manager_client.post(URL, customer_payload, format="json").json()["id"]

    def test_list_scopes(self, manager_client, agent_client, customer_id, customer_payload):
        agent_client.post(URL, {**customer_payload, "phone_number": "913-222-999"}, format="json")

        assert len(manager_client.get(URL).json()) == 2
        agent_view = agent_client.get(URL).json()
        assert len(agent_view) == 1
        assert agent_view[0]["phone_number"] == "913-222-999"

    def test_agent_cannot_read_manager_customer(self, agent_client, customer_id):
        response = agent_client.get(_detail(customer_id))
        assert response.status_code == 404

    def test_other_manager_gets_404(self, api_client, manager_factory, customer_id):
        other = manager_factory(email="other@example.com")
        api_client.force_authenticate(user=other.user)

        assert api_client.get(_detail(customer_id)).status_code == 404

    def test_update(self, manager_client, customer_id, customer_payload):
        response = manager_client.put(
            _detail(customer_id), {**customer_payload, "city": "Porto"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["city"] == "Porto"

    def test_delete(self, manager_client, customer_id):
        assert manager_client.delete(_detail(customer_id)).status_code == 204
        assert manager_client.get(_detail(customer_id)).status_code == 404

    def test_malformed_id(self, manager_client):
        response = manager_client.get(_detail("not-a-uuid"))
        assert response.status_code == 404
