"""Order API views.

Managers and agents create links, list their orders and close placed ones;
placing a link is public, since the customer holding the link has no
account.  Failures propagate as ``ServiceException`` to the global
exception handler.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import GenericViewSet

from modules.core.identity import resolve_identity
from modules.core.pagination import StandardResultsSetPagination
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService
from modules.managers.repositories.django_repository import AgentDjangoRepository
from modules.orders.dtos import CreateOrderLinkDTO, OrderOutputDTO, PlaceOrderDTO
from modules.orders.filters import OrderFilter
from modules.orders.models import Order
from modules.orders.notifications import NotificationKind, OrderNotificationService
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    CreateOrderLinkSerializer,
    NotifyOrderSerializer,
    PlaceOrderSerializer,
)
from modules.orders.services import OrderService


def _render(order) -> dict:
    return OrderOutputDTO.from_entity(order).model_dump(mode="json")


class OrderViewSet(GenericViewSet):
    """Does not extend ``ModelViewSet``: all ORM access goes through the
    service and repository layers."""

    filterset_class = OrderFilter
    ordering_fields = ["created_at", "total_price", "status", "delivery_date"]
    ordering = ["-created_at", "-id"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    pagination_class = StandardResultsSetPagination

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_service=CustomerService(
                repository=CustomerDjangoRepository(),
                agent_repository=AgentDjangoRepository(),
            ),
        )
        self._notifications = OrderNotificationService()

    def get_permissions(self):
        if self.action == "place":
            return [AllowAny()]
        return [IsAuthenticated()]

    def get_throttles(self) -> list[BaseThrottle]:
        if self.action == "create":
            self.throttle_scope = "order_creation"
        elif self.action in {"list", "retrieve"}:
            self.throttle_scope = "order_listing"
        elif self.action == "place":
            self.throttle_scope = "order_placement"
        else:
            self.throttle_scope = None
        return super().get_throttles()

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return Order.objects.none()
        identity = resolve_identity(self.request)
        return self._service.list_orders(identity.manager_id, identity.agent_id)

    # ------------------------------------------------------------------
    # Create / List / Retrieve
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/ creates an empty order link."""
        identity = resolve_identity(request)
        serializer = CreateOrderLinkSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = self._service.create_order_link(
            identity.manager_id,
            identity.agent_id,
            CreateOrderLinkDTO(**serializer.validated_data),
        )
        return Response(_render(order), status=status.HTTP_201_CREATED)

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/

        Filtering by ``OrderFilter``, ordering by ``OrderingFilter``; paginated
        with ``page``/``size`` (size capped by ``ORDER_MAX_PAGE_SIZE``).
        """
        queryset = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(queryset)
        return self.get_paginated_response([_render(order) for order in page])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        identity = resolve_identity(request)
        order = self._service.get_order_for_owner(identity.manager_id, identity.agent_id, pk)
        return Response(_render(order))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @action(detail=True, methods=["post"])
    def place(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/place/ (public link)"""
        serializer = PlaceOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = self._service.place_order(pk, PlaceOrderDTO(**serializer.validated_data))
        return Response(_render(order))

    @action(detail=True, methods=["post"])
    def done(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/done/"""
        identity = resolve_identity(request)
        order = self._service.mark_done(identity.manager_id, identity.agent_id, pk)
        return Response(_render(order))

    @action(detail=True, methods=["post"])
    def cancel(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/cancel/"""
        identity = resolve_identity(request)
        order = self._service.cancel_order(identity.manager_id, identity.agent_id, pk)
        return Response(_render(order))

    @action(detail=True, methods=["post"])
    def notify(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/notify/ emails the customer about the order."""
        identity = resolve_identity(request)
        serializer = NotifyOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = self._service.get_order_for_owner(identity.manager_id, identity.agent_id, pk)
        self._notifications.notify(order, NotificationKind(serializer.validated_data["kind"]))
        return Response(status=status.HTTP_202_ACCEPTED)
