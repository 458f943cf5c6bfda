"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  These are the
contracts between the API layer (DRF views) and the Service layer.  DTOs are
immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``StockUpdateDTO``: input for ``PUT /products/{id}/stock``.
- ``PriceRangeQueryDTO`` / ``LowStockQueryDTO``: query-string filters.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from modules.core.validation import reject_nulls

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
CATEGORY_MIN_LENGTH = 2
CATEGORY_MAX_LENGTH = 100
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2
# Upper bound of the 32-bit integer stock column.
STOCK_MAX = 2_147_483_647


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is 2..200 characters, ``category`` 2..100.
    - ``description`` is at most 1000 characters.
    - ``price`` is a Decimal greater than zero with at most 2 decimal places.
    - ``stock`` is an integer in 0..STOCK_MAX (default 0).
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    price: Decimal = Field(
        gt=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    stock: int = Field(default=0, ge=0, le=STOCK_MAX, strict=True)
    category: str = Field(
        min_length=CATEGORY_MIN_LENGTH, max_length=CATEGORY_MAX_LENGTH
    )
    is_available: bool = Field(default=True, strict=True)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only the fields present in the payload are
    applied.  ``description`` may be cleared with ``null``.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    name: Optional[str] = Field(
        default=None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    price: Optional[Decimal] = Field(
        default=None,
        gt=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )
    stock: Optional[int] = Field(default=None, ge=0, le=STOCK_MAX, strict=True)
    category: Optional[str] = Field(
        default=None, min_length=CATEGORY_MIN_LENGTH, max_length=CATEGORY_MAX_LENGTH
    )
    is_available: Optional[bool] = Field(default=None, strict=True)

    @model_validator(mode="after")
    def only_description_is_nullable(self) -> Self:
        reject_nulls(self.changes(), nullable=("description",))
        return self

    def changes(self) -> dict:
        """Return only the fields explicitly provided by the caller."""
        return self.model_dump(exclude_unset=True)


class StockUpdateDTO(BaseModel):
    """Body of a stock replacement request.

    The sign is checked by ``ProductService.update_stock`` so that a
    negative value yields ``InvalidStock``.
    """

    model_config = ConfigDict(frozen=True)

    stock: int = Field(le=STOCK_MAX, strict=True)


# ---------------------------------------------------------------------------
# Query-string DTOs
# ---------------------------------------------------------------------------


class PriceRangeQueryDTO(BaseModel):
    """``?min=&max=`` for the price-range listing (both required)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    min_price: Decimal = Field(alias="min")
    max_price: Decimal = Field(alias="max")


class LowStockQueryDTO(BaseModel):
    """``?threshold=`` for the low-stock listing (optional)."""

    model_config = ConfigDict(frozen=True)

    threshold: Optional[int] = Field(default=None, le=STOCK_MAX)
