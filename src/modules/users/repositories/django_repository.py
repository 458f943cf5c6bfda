"""Django ORM implementation of the User repository.

Satisfies ``IUserRepository`` using Django's QuerySet API.  Methods return
``None`` / ``False`` for missing rows; the Service Layer decides how to
translate a missing entity into an error.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.users.models import User
from modules.users.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


class UserDjangoRepository(IUserRepository):
    """Concrete User repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[User]:
        """Retrieve a user by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            return User.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
    ) -> List[User]:
        """List users with optional Django ORM look-ups.

        Examples of valid filters::

            {"is_active": True}
            {"name__icontains": "ana", "is_active": True}
        """
        queryset = User.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        if ordering:
            queryset = queryset.order_by(*ordering)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: User, update_fields: Optional[Sequence[str]] = None) -> User:
        """Persist (insert or update) a user.

        Runs in its own savepoint so an ``IntegrityError`` leaves the
        caller's transaction usable.
        """
        is_new = entity._state.adding
        entity.save(update_fields=update_fields)
        logger.info("user.saved", user_id=str(entity.id), is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Permanently delete a user by ID.

        Returns ``True`` if a row was removed, ``False`` otherwise.
        """
        user = self.get_by_id(id)
        if not user:
            return False
        user.delete()
        logger.info("user.hard_deleted", user_id=str(id))
        return True

    def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by email address."""
        return User.objects.filter(email=email).first()
