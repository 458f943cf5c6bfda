"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that the users and
products repository interfaces extend.  Service-layer code depends on this
abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the repository
    (e.g. ``User``, ``Product``).
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
    ) -> List[T]:
        """List entities matching the given look-ups, in the given order."""

    @abstractmethod
    def save(self, entity: T, update_fields: Optional[Sequence[str]] = None) -> T:
        """Persist (insert or update) an entity.

        ``update_fields`` restricts the UPDATE to the named columns.
        """

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Permanently remove an entity by ID."""
