"""Error taxonomy shared by the catalog modules.

Services raise subclasses of these three bases.  The API layer maps each
base to one HTTP status (see ``modules.core.exception_handler``):

- ``EntityNotFound``  -> 404
- ``EntityConflict``  -> 409
- ``InvalidRequest``  -> 400
"""

from __future__ import annotations

from typing import Dict, List, Optional


class EntityNotFound(Exception):
    """The requested record does not exist."""

    code = "not_found"


class EntityConflict(Exception):
    """The operation would violate a uniqueness rule."""

    code = "conflict"


class InvalidRequest(Exception):
    """The request cannot be processed as given."""

    code = "bad_request"

    def __init__(
        self, message: str, errors: Optional[List[Dict[str, str]]] = None
    ) -> None:
        super().__init__(message)
        self.errors = errors or []


class InvalidPayload(InvalidRequest):
    """A create/update payload failed field validation."""

    code = "invalid_payload"
