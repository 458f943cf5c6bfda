"""User repository interface.

Extends ``IRepository[User]`` with the email look-up required by the
uniqueness rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.users.models import User


class IUserRepository(IRepository["User"]):
    """Repository contract for the User entity."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by email address."""
