"""Product service layer (Use Cases).

Orchestrates the Product record operations, delegating persistence to the
injected ``IProductRepository``.

Rules enforced here:
- Updates apply only the fields present in the payload.
- Stock cannot be set below zero.
- ``soft_delete_product`` flags the product unavailable; ``remove_product``
  and ``hard_delete_product`` both delete the row (``DELETE /products/{id}``
  is a permanent delete in the public API).
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import DatabaseError, transaction

from modules.products.exceptions import (
    InvalidPriceRange,
    InvalidStock,
    InvalidStockThreshold,
    ProductCreationFailed,
    ProductNotFound,
)
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

DEFAULT_LOW_STOCK_THRESHOLD = 10

NEWEST_FIRST = ("-created_at", "-id")


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    ``low_stock_threshold`` is used by ``list_low_stock`` when the caller
    does not pass one.
    """

    def __init__(
        self,
        repository: IProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._repo = repository
        self._low_stock_threshold = low_stock_threshold

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product.

        Raises:
            ProductCreationFailed: if the database rejects the row.
        """
        product = Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            stock=dto.stock,
            category=dto.category,
            is_available=dto.is_available,
        )
        try:
            product = self._repo.save(product)
        except DatabaseError as exc:
            logger.error("product.create_failed", name=dto.name, error=str(exc))
            raise ProductCreationFailed("Could not create product.") from exc

        logger.info(
            "product.created", product_id=str(product.id), category=product.category
        )
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)

        changes = dto.changes()
        for field, value in changes.items():
            setattr(product, field, value)

        product = self._repo.save(product)
        logger.info("product.updated", product_id=str(id), fields=sorted(changes))
        return product

    @transaction.atomic
    def update_stock(self, id: str, new_stock: int) -> Product:
        """Replace the stock of a product, touching no other column.

        Raises:
            InvalidStock: if ``new_stock`` is negative.
            ProductNotFound: if the product does not exist.
        """
        if new_stock < 0:
            raise InvalidStock("Stock cannot be negative.")

        product = self.get_product(id)
        previous = product.stock
        product.stock = new_stock
        product = self._repo.save(product, update_fields=["stock"])
        logger.info(
            "product.stock_updated",
            product_id=str(id),
            previous=previous,
            stock=new_stock,
        )
        return product

    @transaction.atomic
    def soft_delete_product(self, id: str) -> None:
        """Mark a product as unavailable, keeping the row.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        product.is_available = False
        self._repo.save(product, update_fields=["is_available"])
        logger.info("product.soft_deleted", product_id=str(id))

    @transaction.atomic
    def hard_delete_product(self, id: str) -> None:
        """Permanently delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self.get_product(id)
        self._repo.delete(id)
        logger.info("product.hard_deleted", product_id=str(id))

    def remove_product(self, id: str) -> None:
        """Permanently delete a product (``DELETE /products/{id}``).

        Same behaviour as ``hard_delete_product``; use
        ``soft_delete_product`` to keep the row.
        """
        self.hard_delete_product(id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product

    def list_products(self) -> List[Product]:
        """Return every product, newest first."""
        return self._repo.list(ordering=NEWEST_FIRST)

    def list_available_products(self) -> List[Product]:
        """Return available products ordered by name."""
        return self._repo.list({"is_available": True}, ordering=("name",))

    def list_by_category(self, category: str) -> List[Product]:
        """Return products whose category matches exactly, newest first."""
        return self._repo.list({"category": category}, ordering=NEWEST_FIRST)

    def list_by_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        """Return products priced within ``[min_price, max_price]``.

        Raises:
            InvalidPriceRange: if a bound is negative or ``min > max``.
        """
        if min_price < 0 or max_price < 0:
            raise InvalidPriceRange("Price bounds cannot be negative.")
        if min_price > max_price:
            raise InvalidPriceRange(
                "Minimum price cannot be greater than maximum price."
            )
        return self._repo.list(
            {"price__gte": min_price, "price__lte": max_price},
            ordering=("price", "name"),
        )

    def list_low_stock(self, threshold: Optional[int] = None) -> List[Product]:
        """Return products with ``stock <= threshold``, lowest stock first.

        Raises:
            InvalidStockThreshold: if ``threshold`` is negative.
        """
        if threshold is None:
            threshold = self._low_stock_threshold
        if threshold < 0:
            raise InvalidStockThreshold("Threshold cannot be negative.")
        return self._repo.list({"stock__lte": threshold}, ordering=("stock", "name"))
