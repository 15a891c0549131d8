"""Integration tests for the business statistics endpoints."""

from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

import pytest

from modules.orders.constants import OrderStatus
from modules.orders.models import Order

pytestmark = pytest.mark.integration

URL = "/api/v1/business-stats/"
JUNE_2024 = {"year": 2024, "month": 6}


@pytest.fixture()
def june_orders(manager, agent):
    def _at(day, hour=12):
        return datetime(2024, 6, day, hour, tzinfo=dt_timezone.utc)

    Order.objects.create(manager=manager, created_at=_at(1))
    Order.objects.create(manager=manager, agent=agent, created_at=_at(2))
    Order.objects.create(
        manager=manager,
        agent=agent,
        status=OrderStatus.DONE,
        total_price=Decimal("12.50"),
        created_at=_at(3),
        completed_at=_at(4),
    )
    Order.objects.create(
        manager=manager,
        status=OrderStatus.DONE,
        total_price=Decimal("7.50"),
        created_at=datetime(2024, 5, 30, tzinfo=dt_timezone.utc),
        completed_at=_at(5),
    )
    Order.objects.create(
        manager=manager,
        status=OrderStatus.CANCELLED,
        total_price=Decimal("99.00"),
        created_at=_at(6),
    )


class TestBusinessStats:
    def test_snapshot(self, manager_client, june_orders, agent):
        response = manager_client.get(URL, JUNE_2024)

        assert response.status_code == 200
        data = response.json()
        assert (data["year"], data["month"]) == (2024, 6)
        assert Decimal(data["monthly_income"]) == Decimal("20.00")
        assert data["completed_orders_count"] == 2
        assert data["orders_by_status"]["DONE"] == 2
        assert data["orders_by_status"]["EXPIRED"] == 0
        links = data["links_created_this_month"]
        assert links["manager_links"] == 2
        assert links["agent_links"] == 2
        assert links["links_per_agent"][str(agent.id)]["agent_name"] == "Ana Silva"

    def test_links_created(self, manager_client, june_orders):
        data = manager_client.get(f"{URL}links-created/", JUNE_2024).json()
        assert data["total"] == 4

    def test_orders_by_status(self, manager_client, june_orders):
        data = manager_client.get(f"{URL}orders-by-status/").json()
        assert data == {"CREATED": 2, "PLACED": 0, "DONE": 2, "CANCELLED": 1, "EXPIRED": 0}

    def test_monthly_income(self, manager_client, june_orders):
        data = manager_client.get(f"{URL}monthly-income/", JUNE_2024).json()

        assert data["monthly_income"] == "20.00"
        assert data["completed_orders_count"] == 2

    def test_yearly_data(self, manager_client, june_orders):
        data = manager_client.get(f"{URL}yearly-data/", {"year": 2024}).json()

        assert len(data) == 12
        june = data[5]
        assert june["month_name"] == "June"
        assert Decimal(june["revenue"]) == Decimal("20.00")
        assert Decimal(data[4]["revenue"]) == Decimal("0")

    def test_other_manager_sees_nothing(self, api_client, manager_factory, june_orders):
        other = manager_factory(email="other@example.com")
        api_client.force_authenticate(user=other.user)

        data = api_client.get(f"{URL}monthly-income/", JUNE_2024).json()

        assert data["monthly_income"] == "0.00"


class TestStatsErrors:
    @pytest.mark.parametrize("params", [{"month": 13}, {"month": "june"}, {"year": "x"}])
    def test_invalid_period(self, manager_client, params):
        response = manager_client.get(URL, params)

        assert response.status_code == 400
        assert response.json()["kind"] == "VALIDATION_ERROR"

    def test_agents_are_forbidden(self, agent_client):
        assert agent_client.get(URL).status_code == 403
