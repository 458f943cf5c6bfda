"""Product DRF serializer for API output.

Input validation lives in the Pydantic DTOs (``dtos.py``); this serializer
only renders ``Product`` rows.  ``price`` is rendered as a string to keep
its two decimal places exact.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "stock",
            "category",
            "is_available",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
