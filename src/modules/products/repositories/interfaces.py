"""Product repository interface.

The generic ``list(filters, ordering)`` covers every product query
(availability, category, price range, low stock), so the contract adds
nothing beyond ``IRepository[Product]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""
