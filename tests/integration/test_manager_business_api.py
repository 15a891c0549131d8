"""Integration tests for the manager profile and business endpoints."""

import pytest

pytestmark = pytest.mark.integration

MANAGERS_URL = "/api/v1/managers/"
MANAGER_ME_URL = "/api/v1/managers/me/"
BUSINESSES_URL = "/api/v1/businesses/"
BUSINESS_ME_URL = "/api/v1/businesses/me/"

BUSINESS_PAYLOAD = {
    "name": "Padaria Central",
    "state_id_number": "PT509876543",
    "email": "geral@padaria.pt",
    "phone_number": "213-456-789",
    "street_address": "Rua da Prata 20",
    "city": "Lisbon",
}


@pytest.fixture()
def admin_client(api_client, django_user_model):
    admin = django_user_model.objects.create_superuser(
        username="admin", email="admin@example.com", password="Str0ng!Pass"
    )
    api_client.force_authenticate(user=admin)
    return api_client


class TestManagers:
    def test_admin_creates_manager(self, admin_client):
        response = admin_client.post(
            MANAGERS_URL,
            {
                "first_name": "Paulo",
                "last_name": "Reis",
                "email": "Paulo@Example.com",
                "password": "Str0ng!Pass",
                "phone_number": "911 222 333",
                "date_of_birth": "1990-01-20",
                "street_address": "Rua Direita 1",
                "city": "Coimbra",
            },
            format="json",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "paulo@example.com"
        assert "password" not in data

    def test_non_admin_cannot_create(self, manager_client):
        response = manager_client.post(MANAGERS_URL, {}, format="json")
        assert response.status_code == 403

    def test_duplicate_email(self, admin_client, manager):
        response = admin_client.post(
            MANAGERS_URL,
            {
                "first_name": "Other",
                "last_name": "Person",
                "email": manager.email.upper(),
                "password": "Str0ng!Pass",
                "phone_number": "911 222 333",
                "date_of_birth": "1990-01-20",
                "street_address": "Rua Direita 1",
                "city": "Coimbra",
            },
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["kind"] == "VALIDATION_ERROR"

    def test_manager_reads_and_updates_profile(self, manager_client):
        response = manager_client.put(
            MANAGER_ME_URL,
            {
                "first_name": "Maria",
                "last_name": "Costa",
                "phone_number": "912-000-111",
                "date_of_birth": "1985-04-02",
                "street_address": "Rua Augusta 12",
                "city": "Porto",
            },
            format="json",
        )
        assert response.status_code == 200

        profile = manager_client.get(MANAGER_ME_URL).json()
        assert profile["city"] == "Porto"
        assert profile["phone_number"] == "912-000-111"

    def test_agent_cannot_read_manager_profile(self, agent_client):
        assert agent_client.get(MANAGER_ME_URL).status_code == 403

    def test_change_password(self, manager_client, manager):
        response = manager_client.put(
            f"{MANAGER_ME_URL}password/",
            {
                "old_password": "Str0ng!Pass",
                "new_password": "N3w!Secret",
                "new_password_confirmation": "N3w!Secret",
            },
            format="json",
        )

        assert response.status_code == 200
        manager.user.refresh_from_db()
        assert manager.user.check_password("N3w!Secret")

    def test_change_password_wrong_old(self, manager_client):
        response = manager_client.put(
            f"{MANAGER_ME_URL}password/",
            {
                "old_password": "Wr0ng!Pass",
                "new_password": "N3w!Secret",
                "new_password_confirmation": "N3w!Secret",
            },
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["user_message"] == "Old password is incorrect"


class TestBusinesses:
    def test_create_and_read(self, manager_client, manager):
        created = manager_client.post(BUSINESSES_URL, BUSINESS_PAYLOAD, format="json")
        assert created.status_code == 201
        assert created.json()["manager_id"] == str(manager.id)

        response = manager_client.get(BUSINESS_ME_URL)
        assert response.status_code == 200
        assert response.json()["name"] == "Padaria Central"

    def test_one_business_per_manager(self, manager_client):
        manager_client.post(BUSINESSES_URL, BUSINESS_PAYLOAD, format="json")
        response = manager_client.post(BUSINESSES_URL, BUSINESS_PAYLOAD, format="json")
        assert response.status_code == 400

    def test_missing_business(self, manager_client):
        response = manager_client.get(BUSINESS_ME_URL)
        assert response.status_code == 404
        assert response.json()["kind"] == "NOT_FOUND"

    def test_update(self, manager_client):
        manager_client.post(BUSINESSES_URL, BUSINESS_PAYLOAD, format="json")

        response = manager_client.put(
            BUSINESS_ME_URL, {**BUSINESS_PAYLOAD, "city": "Braga"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["city"] == "Braga"

    def test_agent_forbidden(self, agent_client):
        response = agent_client.post(BUSINESSES_URL, BUSINESS_PAYLOAD, format="json")
        assert response.status_code == 403
