"""Manager API views.

Creating managers is an admin operation; a manager reads and edits its own
profile through ``/managers/me/``.  Failures propagate as
``ServiceException`` and are rendered by the global exception handler.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.identity import CallerIdentity, resolve_identity
from modules.managers.dtos import (
    ChangePasswordDTO,
    CreateManagerDTO,
    ManagerOutputDTO,
    UpdateManagerDTO,
)
from modules.managers.repositories.django_repository import ManagerDjangoRepository
from modules.managers.serializers import (
    ChangePasswordSerializer,
    CreateManagerSerializer,
    ManagerDetailsSerializer,
)
from modules.managers.services import ManagerService


class ManagerViewSet(ViewSet):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ManagerService(repository=ManagerDjangoRepository())

    def get_permissions(self):
        if self.action == "create":
            return [IsAdminUser()]
        return [IsAuthenticated()]

    def _manager_identity(self, request: Request) -> CallerIdentity:
        identity = resolve_identity(request)
        if identity.is_agent:
            raise PermissionDenied("Agents cannot access the manager profile.")
        return identity

    def create(self, request: Request) -> Response:
        """POST /api/v1/managers/"""
        serializer = CreateManagerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        manager = self._service.create_manager(CreateManagerDTO(**serializer.validated_data))
        out = ManagerOutputDTO.from_entity(manager)
        return Response(out.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    @action(detail=False, methods=["get", "put"], url_path="me")
    def me(self, request: Request) -> Response:
        """GET/PUT /api/v1/managers/me/"""
        identity = self._manager_identity(request)
        if request.method == "GET":
            manager = self._service.get_manager(str(identity.manager_id))
        else:
            serializer = ManagerDetailsSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            manager = self._service.update_manager(
                str(identity.manager_id), UpdateManagerDTO(**serializer.validated_data)
            )
        return Response(ManagerOutputDTO.from_entity(manager).model_dump(mode="json"))

    @action(detail=False, methods=["put"], url_path="me/password")
    def password(self, request: Request) -> Response:
        """PUT /api/v1/managers/me/password/"""
        identity = self._manager_identity(request)
        serializer = ChangePasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self._service.update_password(
            str(identity.manager_id), ChangePasswordDTO(**serializer.validated_data)
        )
        return Response({"detail": "Password updated successfully"})
