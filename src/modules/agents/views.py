"""Agent API views.

Managers manage their agents under ``/agents/``; an authenticated agent
reads and edits its own profile under ``/agents/me/``.  Failures propagate
as ``ServiceException`` to the global exception handler.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.agents.dtos import AgentOutputDTO, CreateAgentDTO, UpdateAgentDTO
from modules.agents.serializers import AgentDetailsSerializer, CreateAgentSerializer
from modules.agents.services import AgentService
from modules.core.identity import CallerIdentity, resolve_identity
from modules.managers.dtos import ChangePasswordDTO
from modules.managers.repositories.django_repository import AgentDjangoRepository
from modules.managers.serializers import ChangePasswordSerializer


def _render(agent) -> dict:
    return AgentOutputDTO.from_entity(agent).model_dump(mode="json")


class AgentViewSet(ViewSet):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = AgentService(repository=AgentDjangoRepository())

    def _manager_identity(self, request: Request) -> CallerIdentity:
        identity = resolve_identity(request)
        if identity.is_agent:
            raise PermissionDenied("Only managers can manage agents.")
        return identity

    def _agent_identity(self, request: Request) -> CallerIdentity:
        identity = resolve_identity(request)
        if not identity.is_agent:
            raise PermissionDenied("Only agents have an agent profile.")
        return identity

    def _details(self, request: Request) -> UpdateAgentDTO:
        serializer = AgentDetailsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return UpdateAgentDTO(**serializer.validated_data)

    def list(self, request: Request) -> Response:
        """GET /api/v1/agents/"""
        identity = self._manager_identity(request)
        agents = self._service.list_agents(identity.manager_id)
        return Response([_render(agent) for agent in agents])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/agents/{pk}/"""
        identity = self._manager_identity(request)
        return Response(_render(self._service.get_agent(identity.manager_id, pk)))

    def create(self, request: Request) -> Response:
        """POST /api/v1/agents/"""
        identity = self._manager_identity(request)
        serializer = CreateAgentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        agent = self._service.create_agent(
            identity.manager_id, CreateAgentDTO(**serializer.validated_data)
        )
        return Response(_render(agent), status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/agents/{pk}/"""
        identity = self._manager_identity(request)
        agent = self._service.update_agent(identity.manager_id, pk, self._details(request))
        return Response(_render(agent))

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/agents/{pk}/"""
        identity = self._manager_identity(request)
        self._service.delete_agent(identity.manager_id, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get", "put"], url_path="me")
    def me(self, request: Request) -> Response:
        """GET/PUT /api/v1/agents/me/"""
        identity = self._agent_identity(request)
        if request.method == "GET":
            agent = self._service.get_own_profile(identity.agent_id)
        else:
            agent = self._service.update_own_profile(identity.agent_id, self._details(request))
        return Response(_render(agent))

    @action(detail=False, methods=["put"], url_path="me/password")
    def password(self, request: Request) -> Response:
        """PUT /api/v1/agents/me/password/"""
        identity = self._agent_identity(request)
        serializer = ChangePasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self._service.update_password(
            identity.agent_id, ChangePasswordDTO(**serializer.validated_data)
        )
        return Response({"detail": "Password updated successfully"})
