"""User service layer (Use Cases).

Orchestrates the User record operations, delegating persistence to the
injected ``IUserRepository``.

Rules enforced here:
- Email must be unique (pre-check, plus the DB constraint as final guard).
- Updates apply only the fields present in the payload.
- ``remove_user`` deactivates; ``hard_delete_user`` deletes the row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import DatabaseError, IntegrityError, transaction

from modules.users.exceptions import UserAlreadyExists, UserCreationFailed, UserNotFound
from modules.users.models import User

if TYPE_CHECKING:
    from modules.users.dtos import CreateUserDTO, UpdateUserDTO
    from modules.users.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)

NEWEST_FIRST = ("-created_at", "-id")


class UserService:
    """Application service for User use-cases.

    Receives an ``IUserRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IUserRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_user(self, dto: CreateUserDTO) -> User:
        """Create a new user after enforcing email uniqueness.

        Raises:
            UserAlreadyExists: if the email is already registered.
            UserCreationFailed: if the database rejects the row otherwise.
        """
        log = logger.bind(email=dto.email)

        self._ensure_email_available(dto.email)

        user = User(
            name=dto.name,
            email=dto.email,
            age=dto.age,
            is_active=dto.is_active,
        )
        try:
            user = self._repo.save(user)
        except IntegrityError as exc:
            # Lost a race with a concurrent create for the same address.
            if self._repo.get_by_email(dto.email):
                log.warning("user.duplicate_email", stage="insert")
                raise UserAlreadyExists(
                    f"A user with email {dto.email} already exists."
                ) from exc
            log.error("user.create_failed", error=str(exc))
            raise UserCreationFailed("Could not create user.") from exc
        except DatabaseError as exc:
            log.error("user.create_failed", error=str(exc))
            raise UserCreationFailed("Could not create user.") from exc

        log.info("user.created", user_id=str(user.id))
        return user

    @transaction.atomic
    def update_user(self, id: str, dto: UpdateUserDTO) -> User:
        """Apply the supplied fields to an existing user.

        Raises:
            UserNotFound: if the user does not exist.
            UserAlreadyExists: if the new email belongs to another user.
        """
        user = self.get_user(id)
        log = logger.bind(user_id=str(id))

        changes = dto.changes()
        new_email = changes.get("email")
        if new_email is not None and new_email != user.email:
            self._ensure_email_available(new_email)

        for field, value in changes.items():
            setattr(user, field, value)

        try:
            user = self._repo.save(user)
        except IntegrityError as exc:
            log.warning("user.duplicate_email", stage="update")
            raise UserAlreadyExists(
                f"A user with email {new_email} already exists."
            ) from exc

        log.info("user.updated", fields=sorted(changes))
        return user

    @transaction.atomic
    def remove_user(self, id: str) -> None:
        """Soft-delete a user by marking it inactive.

        Raises:
            UserNotFound: if the user does not exist.
        """
        user = self.get_user(id)
        user.is_active = False
        self._repo.save(user, update_fields=["is_active"])
        logger.info("user.deactivated", user_id=str(id))

    @transaction.atomic
    def hard_delete_user(self, id: str) -> None:
        """Permanently delete a user.

        Raises:
            UserNotFound: if the user does not exist.
        """
        self.get_user(id)
        self._repo.delete(id)
        logger.info("user.hard_deleted", user_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_users(self) -> List[User]:
        """Return every user, newest first."""
        return self._repo.list(ordering=NEWEST_FIRST)

    def list_active_users(self) -> List[User]:
        """Return active users, newest first."""
        return self._repo.list({"is_active": True}, ordering=NEWEST_FIRST)

    def get_user(self, id: str) -> User:
        """Retrieve a single user by ID.

        Raises:
            UserNotFound: if the user does not exist.
        """
        user = self._repo.get_by_id(id)
        if not user:
            raise UserNotFound(f"User {id} not found.")
        return user

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_email_available(self, email: str) -> None:
        if self._repo.get_by_email(email):
            logger.warning("user.duplicate_email", email=email)
            raise UserAlreadyExists(f"A user with email {email} already exists.")
