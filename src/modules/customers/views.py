"""Customer API views.

Exposes ``CustomerService`` over HTTP.  The caller scope (manager, or agent
acting for its manager) comes from the authenticated user; failures
propagate as ``ServiceException`` to the global exception handler.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.identity import resolve_identity
from modules.customers.dtos import CustomerOutputDTO, CustomerPayloadDTO
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerPayloadSerializer
from modules.customers.services import CustomerService
from modules.managers.repositories.django_repository import AgentDjangoRepository


def _render(customer) -> dict:
    return CustomerOutputDTO.from_entity(customer).model_dump(mode="json")


class CustomerViewSet(ViewSet):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(
            repository=CustomerDjangoRepository(),
            agent_repository=AgentDjangoRepository(),
        )

    def _payload(self, request: Request) -> CustomerPayloadDTO:
        serializer = CustomerPayloadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return CustomerPayloadDTO(**serializer.validated_data)

    def list(self, request: Request) -> Response:
        """GET /api/v1/customers/"""
        identity = resolve_identity(request)
        customers = self._service.list_customers(identity.manager_id, identity.agent_id)
        return Response([_render(customer) for customer in customers])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        identity = resolve_identity(request)
        customer = self._service.get_customer(identity.manager_id, identity.agent_id, pk)
        return Response(_render(customer))

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        identity = resolve_identity(request)
        customer = self._service.create_customer(
            identity.manager_id, identity.agent_id, self._payload(request)
        )
        return Response(_render(customer), status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/customers/{pk}/"""
        identity = resolve_identity(request)
        customer = self._service.update_customer(
            identity.manager_id, identity.agent_id, pk, self._payload(request)
        )
        return Response(_render(customer))

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{pk}/"""
        identity = resolve_identity(request)
        self._service.delete_customer(identity.manager_id, identity.agent_id, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
