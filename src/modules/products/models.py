"""Product model with price and stock constraints.

Rules implemented here:
- Price must be greater than zero, with at most 2 decimal places.
- Stock cannot be negative (defaults to 0).
- Soft delete is expressed by ``is_available=False``; hard delete removes
  the row.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import (
    MaxLengthValidator,
    MinLengthValidator,
    MinValueValidator,
)
from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Product record.

    ``category`` is indexed because it backs the exact-match category
    listing.
    """

    name = models.CharField(max_length=200, validators=[MinLengthValidator(2)])
    description = models.TextField(  # noqa: DJ01
        max_length=1000,
        null=True,
        blank=True,
        default=None,
        validators=[MaxLengthValidator(1000)],
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    stock = models.IntegerField(default=0, validators=[MinValueValidator(0)])
    category = models.CharField(max_length=100, validators=[MinLengthValidator(2)])
    is_available = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["category"], name="products_category_idx"),
            models.Index(fields=["is_available"], name="products_available_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(stock__gte=0),
                name="products_stock_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.category})"
