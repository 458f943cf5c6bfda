"""User API views.

Exposes the ``UserService`` via HTTP using a DRF ViewSet.  Payloads are
validated into Pydantic DTOs; domain exceptions propagate to
``modules.core.exception_handler``, which maps them to 400/404/409.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.validation import validate_payload
from modules.users.dtos import CreateUserDTO, UpdateUserDTO
from modules.users.models import User
from modules.users.repositories.django_repository import UserDjangoRepository
from modules.users.serializers import UserSerializer
from modules.users.services import UserService


class UserViewSet(GenericViewSet):
    """ViewSet for User CRUD operations.

    Uses ``UserService`` with ``UserDjangoRepository`` (DIP).  All ORM
    access goes through the service/repository layer.
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = UserService(repository=UserDjangoRepository())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/users"""
        users = self._service.list_users()
        return Response(UserSerializer(users, many=True).data)

    @action(detail=False, methods=["get"], url_path="active")
    def active(self, request: Request) -> Response:
        """GET /api/v1/users/active"""
        users = self._service.list_active_users()
        return Response(UserSerializer(users, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/users/{pk}"""
        user = self._service.get_user(pk)
        return Response(UserSerializer(user).data)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/users"""
        dto = validate_payload(CreateUserDTO, request.data)
        user = self._service.create_user(dto)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/users/{pk}"""
        dto = validate_payload(UpdateUserDTO, request.data)
        user = self._service.update_user(pk, dto)
        return Response(UserSerializer(user).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/users/{pk} (deactivates, keeps the row)"""
        self._service.remove_user(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["delete"], url_path="hard")
    def hard_delete(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/users/{pk}/hard"""
        self._service.hard_delete_user(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
