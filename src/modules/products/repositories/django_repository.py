"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.  Methods
return ``None`` / ``False`` for missing rows; the Service Layer decides how
to translate a missing entity into an error.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
    ) -> List[Product]:
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"is_available": True}
            {"price__gte": Decimal("10"), "price__lte": Decimal("20")}
            {"stock__lte": 5}
        """
        queryset = Product.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        if ordering:
            queryset = queryset.order_by(*ordering)
        return list(queryset)

    @transaction.atomic
    def save(
        self, entity: Product, update_fields: Optional[Sequence[str]] = None
    ) -> Product:
        """Persist (insert or update) a product."""
        is_new = entity._state.adding
        entity.save(update_fields=update_fields)
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            is_new=is_new,
            update_fields=list(update_fields) if update_fields else None,
        )
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Permanently delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` otherwise.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        logger.info("product.hard_deleted", product_id=str(id))
        return True
