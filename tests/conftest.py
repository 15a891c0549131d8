from datetime import date, datetime, timezone as dt_timezone

import pytest

from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from modules.core.clock import FixedClock

FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=dt_timezone.utc)


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def fixed_clock():
    return FixedClock(FIXED_NOW)


@pytest.fixture()
def manager_factory():
    from modules.managers.models import Manager

    def _make(email="manager@example.com", **overrides):
        user = get_user_model().objects.create_user(
            username=email, email=email, password="Str0ng!Pass"
        )
        defaults = {
            "user": user,
            "first_name": "Maria",
            "last_name": "Costa",
            "email": email,
            "phone_number": "912-345-678",
            "date_of_birth": date(1985, 4, 2),
            "street_address": "Rua Augusta 10",
            "city": "Lisbon",
        }
        defaults.update(overrides)
        return Manager.objects.create(**defaults)

    return _make


@pytest.fixture()
def agent_factory():
    from modules.managers.models import Agent

    def _make(manager, first_name="Ana", last_name="Silva", with_user=True):
        user = None
        if with_user:
            username = f"{first_name.lower()}.{last_name.lower()}@example.com"
            user = get_user_model().objects.create_user(
                username=username, email=username, password="Str0ng!Pass"
            )
        return Agent.objects.create(
            manager=manager, user=user, first_name=first_name, last_name=last_name
        )

    return _make


@pytest.fixture()
def manager(manager_factory):
    return manager_factory()


@pytest.fixture()
def agent(manager, agent_factory):
    return agent_factory(manager)


@pytest.fixture()
def manager_client(manager):
    client = APIClient()
    client.force_authenticate(user=manager.user)
    return client


@pytest.fixture()
def agent_client(agent):
    client = APIClient()
    client.force_authenticate(user=agent.user)
    return client


@pytest.fixture()
def customer_payload():
    return {
        "name": "Joana Pereira",
        "phone_number": "913-222-111",
        "email": "joana@example.com",
        "street_address": "Avenida da Liberdade 1",
        "city": "Lisbon",
        "state_id": "123456789",
    }


@pytest.fixture()
def place_payload():
    return {
        "customer_name": "Joana Pereira",
        "customer_phone": "913-222-111",
        "customer_email": "joana@example.com",
        "customer_street_address": "Avenida da Liberdade 1",
        "customer_city": "Lisbon",
        "items": [
            {"product_id": "p-1", "product_name": "Bread", "quantity": 2, "unit_price": "1.50"},
            {"product_id": "p-2", "product_name": "Cheese", "quantity": 1, "unit_price": "7.00"},
        ],
        "notes": "Ring twice",
    }
