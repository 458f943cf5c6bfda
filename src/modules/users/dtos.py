"""User DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  These are the
contracts between the API layer (DRF views) and the Service layer.  DTOs are
immutable (``frozen=True``).

- ``CreateUserDTO``: input for user creation.
- ``UpdateUserDTO``: input for partial user updates.

Input DTOs accept both snake_case names and their camelCase aliases
(``is_active`` / ``isActive``).
"""

from __future__ import annotations

from typing import Optional, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from modules.core.validation import reject_nulls

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
AGE_MIN = 1
AGE_MAX = 150
EMAIL_MAX_LENGTH = 150


def _check_email_length(value: Optional[str]) -> Optional[str]:
    if value is not None and len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(
            f"Email must be at most {EMAIL_MAX_LENGTH} characters."
        )
    return value


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateUserDTO(BaseModel):
    """Immutable DTO for user creation requests.

    Validates:
    - ``name`` is 2..100 characters.
    - ``email`` is a well-formed address (Pydantic ``EmailStr``) that fits
      the 150-character column.
    - ``age``, when given, is an integer in 1..150.
    - ``is_active`` is a boolean, defaulting to ``True``.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: EmailStr
    age: Optional[int] = Field(default=None, ge=AGE_MIN, le=AGE_MAX, strict=True)
    is_active: bool = Field(default=True, strict=True)

    email_fits_column = field_validator("email")(_check_email_length)


class UpdateUserDTO(BaseModel):
    """Immutable DTO for user update requests.

    All fields are optional.  Only the fields present in the payload
    (``model_fields_set``) are applied; ``age`` is the only one that may be
    explicitly cleared with ``null``.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    name: Optional[str] = Field(
        default=None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
    email: Optional[EmailStr] = None
    age: Optional[int] = Field(default=None, ge=AGE_MIN, le=AGE_MAX, strict=True)
    is_active: Optional[bool] = Field(default=None, strict=True)

    email_fits_column = field_validator("email")(_check_email_length)

    @model_validator(mode="after")
    def only_age_is_nullable(self) -> Self:
        reject_nulls(self.changes(), nullable=("age",))
        return self

    def changes(self) -> dict:
        """Return only the fields explicitly provided by the caller."""
        return self.model_dump(exclude_unset=True)

