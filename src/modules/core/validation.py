"""Payload validation entry point for the API layer.

Views hand raw request data to ``validate_payload`` together with the DTO
class for the operation.  The result is either a validated, immutable DTO or
an ``InvalidPayload`` carrying one ``{"field", "message"}`` entry per
violated rule.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Type, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from modules.core.exceptions import InvalidPayload

logger = structlog.get_logger(__name__)

DTO = TypeVar("DTO", bound=BaseModel)


def field_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Flatten a pydantic ``ValidationError`` into field/message pairs."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "__all__"
        message = error["msg"]
        # "Value error, Price must ..." -> "Price must ..."
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append({"field": field, "message": message})
    return errors


def validate_payload(dto_class: Type[DTO], data: Any) -> DTO:
    """Validate ``data`` against ``dto_class``.

    Raises:
        InvalidPayload: with the list of field errors.
    """
    if isinstance(data, Mapping) and hasattr(data, "dict"):
        # QueryDict (form-encoded bodies) -> plain dict of last values.
        data = data.dict()
    try:
        return dto_class.model_validate(data)
    except ValidationError as exc:
        errors = field_errors(exc)
        logger.info(
            "payload.invalid",
            dto=dto_class.__name__,
            fields=[e["field"] for e in errors],
        )
        raise InvalidPayload("Invalid payload.", errors=errors) from exc


def reject_nulls(values: Dict[str, Any], nullable: tuple[str, ...] = ()) -> None:
    """Raise ``ValueError`` when a non-nullable field was sent as ``null``.

    Used by update DTOs, where every field is optional but only some columns
    accept ``NULL``.
    """
    for name, value in values.items():
        if value is None and name not in nullable:
            raise ValueError(f"Field '{name}' cannot be null.")
