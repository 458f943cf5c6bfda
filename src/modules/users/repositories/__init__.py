"""User repositories package."""

from modules.users.repositories.django_repository import UserDjangoRepository
from modules.users.repositories.interfaces import IUserRepository

__all__ = ["IUserRepository", "UserDjangoRepository"]
