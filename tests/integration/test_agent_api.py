"""Integration tests for the agent endpoints.

Covers manager-side management (create, list, update, delete, agent cap),
the agent's own profile and password, and the customer cap reached
through an agent created over the API.
"""

import pytest
from rest_framework.test import APIClient

pytestmark = pytest.mark.integration

URL = "/api/v1/agents/"
ME_URL = f"{URL}me/"
TOKEN_URL = "/api/v1/auth/token/"


def _detail(agent_id):
    return f"{URL}{agent_id}/"


@pytest.fixture()
def agent_payload():
    return {
        "first_name": "Rui",
        "last_name": "Mendes",
        "email": "rui.mendes@example.com",
        "password": "Ag3nt!Pass",
        "phone_number": "914-555-000",
        "street_address": "Rua Garrett 3",
        "city": "Lisbon",
    }


def _login(email, password):
    client = APIClient()
    response = client.post(TOKEN_URL, {"username": email, "password": password}, format="json")
    assert response.status_code == 200
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.json()['access']}")
    return client


class TestManagerSide:
    def test_create_and_list(self, manager_client, manager, agent_payload):
        response = manager_client.post(URL, agent_payload, format="json")

        assert response.status_code == 201
        data = response.json()
        assert data["manager_id"] == str(manager.id)
        assert data["email"] == "rui.mendes@example.com"
        assert "password" not in data

        listing = manager_client.get(URL)
        assert [agent["id"] for agent in listing.json()] == [data["id"]]

    def test_weak_password_rejected(self, manager_client, agent_payload):
        response = manager_client.post(
            URL, {**agent_payload, "password": "password"}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["user_message"] == "Password does not meet security requirements"

    def test_agent_cap(self, manager_client, manager, agent_factory, agent_payload, settings):
        settings.MAX_AGENTS_PER_MANAGER = 2
        agent_factory(manager, first_name="Ana")
        agent_factory(manager, first_name="Bea")

        response = manager_client.post(URL, agent_payload, format="json")

        assert response.status_code == 400
        body = response.json()
        assert body["kind"] == "CAPACITY_EXCEEDED"
        assert body["severity"] == "INFO"

    def test_duplicate_email(self, manager_client, agent_payload):
        manager_client.post(URL, agent_payload, format="json")

        response = manager_client.post(
            URL, {**agent_payload, "phone_number": "914-555-001"}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["user_message"] == "An agent with this email already exists"

    def test_update(self, manager_client, agent):
        response = manager_client.put(
            _detail(agent.id),
            {
                "first_name": "Ana",
                "last_name": "Silva Costa",
                "phone_number": "915-000-111",
                "street_address": "Rua Nova 8",
                "city": "Porto",
            },
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["last_name"] == "Silva Costa"

    def test_other_managers_agent_is_not_found(self, manager_factory, agent_factory):
        other = manager_factory(email="other@example.com")
        foreign = agent_factory(other, first_name="Zé")
        client = APIClient()
        client.force_authenticate(user=manager_factory(email="me@example.com").user)

        assert client.get(_detail(foreign.id)).status_code == 404
        assert client.delete(_detail(foreign.id)).status_code == 404

    def test_delete(self, manager_client, agent):
        response = manager_client.delete(_detail(agent.id))

        assert response.status_code == 204
        assert manager_client.get(_detail(agent.id)).status_code == 404

    def test_agents_cannot_manage_agents(self, agent_client, agent_payload):
        response = agent_client.post(URL, agent_payload, format="json")

        assert response.status_code == 403


class TestAgentSide:
    def test_new_agent_logs_in_and_reads_profile(self, manager_client, agent_payload):
        manager_client.post(URL, agent_payload, format="json")
        client = _login("rui.mendes@example.com", "Ag3nt!Pass")

        response = client.get(ME_URL)

        assert response.status_code == 200
        assert response.json()["first_name"] == "Rui"

    def test_update_own_profile(self, agent_client):
        response = agent_client.put(
            ME_URL,
            {
                "first_name": "Ana",
                "last_name": "Silva",
                "phone_number": "915-000-222",
                "street_address": "Rua do Carmo 2",
                "city": "Braga",
            },
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["city"] == "Braga"

    def test_manager_has_no_agent_profile(self, manager_client):
        assert manager_client.get(ME_URL).status_code == 403

    def test_change_password(self, agent_client, agent):
        response = agent_client.put(
            f"{ME_URL}password/",
            {
                "old_password": "Str0ng!Pass",
                "new_password": "N3w!Secret",
                "new_password_confirmation": "N3w!Secret",
            },
            format="json",
        )

        assert response.status_code == 200
        _login(agent.user.username, "N3w!Secret")


class TestAgentScopedCustomers:
    def test_customer_cap_is_per_agent(self, manager_client, agent_payload, customer_payload, settings):
        settings.MAX_CUSTOMER_CAP = 1
        manager_client.post(URL, agent_payload, format="json")
        client = _login("rui.mendes@example.com", "Ag3nt!Pass")

        first = client.post("/api/v1/customers/", customer_payload, format="json")
        second = client.post(
            "/api/v1/customers/",
            {**customer_payload, "phone_number": "913-222-112"},
            format="json",
        )

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json()["kind"] == "CAPACITY_EXCEEDED"
