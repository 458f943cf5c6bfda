"""User domain exceptions.

Raised by the Service Layer; the DRF exception handler translates them
into HTTP responses through their core base class.
"""

from __future__ import annotations

from modules.core.exceptions import EntityConflict, EntityNotFound, InvalidRequest


class UserAlreadyExists(EntityConflict):
    """A user with the same email already exists."""


class UserNotFound(EntityNotFound):
    """The requested user does not exist."""


class UserCreationFailed(InvalidRequest):
    """The database rejected the new user for a reason other than a duplicate email."""
