"""Business API views (manager only)."""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.businesses.dtos import BusinessOutputDTO, CreateBusinessDTO, UpdateBusinessDTO
from modules.businesses.repositories.django_repository import BusinessDjangoRepository
from modules.businesses.serializers import BusinessDetailsSerializer
from modules.businesses.services import BusinessService
from modules.core.identity import CallerIdentity, resolve_identity


class BusinessViewSet(ViewSet):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = BusinessService(repository=BusinessDjangoRepository())

    def _manager_identity(self, request: Request) -> CallerIdentity:
        identity = resolve_identity(request)
        if identity.is_agent:
            raise PermissionDenied("Only managers can manage the business profile.")
        return identity

    def create(self, request: Request) -> Response:
        """POST /api/v1/businesses/"""
        identity = self._manager_identity(request)
        serializer = BusinessDetailsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dto = CreateBusinessDTO(manager_id=str(identity.manager_id), **serializer.validated_data)
        business = self._service.create_business(dto)
        out = BusinessOutputDTO.from_entity(business)
        return Response(out.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    @action(detail=False, methods=["get", "put"], url_path="me")
    def me(self, request: Request) -> Response:
        """GET/PUT /api/v1/businesses/me/"""
        identity = self._manager_identity(request)
        manager_id = str(identity.manager_id)
        if request.method == "GET":
            business = self._service.get_business_for_manager(manager_id)
        else:
            serializer = BusinessDetailsSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            business = self._service.update_business(
                manager_id, UpdateBusinessDTO(**serializer.validated_data)
            )
        return Response(BusinessOutputDTO.from_entity(business).model_dump(mode="json"))
