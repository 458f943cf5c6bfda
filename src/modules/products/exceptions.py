"""Product domain exceptions.

Raised by the Service Layer; the DRF exception handler translates them
into HTTP responses through their core base class.
"""

from __future__ import annotations

from modules.core.exceptions import EntityNotFound, InvalidRequest


class ProductNotFound(EntityNotFound):
    """The requested product does not exist."""


class ProductCreationFailed(InvalidRequest):
    """The database rejected the new product."""


class InvalidStock(InvalidRequest):
    """A stock value below zero was supplied."""


class InvalidStockThreshold(InvalidRequest):
    """A low-stock threshold below zero was supplied."""


class InvalidPriceRange(InvalidRequest):
    """The price bounds are negative or inverted (min > max)."""
