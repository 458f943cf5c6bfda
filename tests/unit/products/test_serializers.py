"""Unit tests for the Product read serializer."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


class TestProductSerializer:
    def test_renders_all_fields(self, make_product):
        product = make_product(description="Sturdy", price=Decimal("19.99"))

        data = ProductSerializer(product).data

        assert set(data) == {
            "id",
            "name",
            "description",
            "price",
            "stock",
            "category",
            "is_available",
            "created_at",
            "updated_at",
        }
        assert data["id"] == str(product.id)
        assert data["price"] == "19.99"
        assert data["description"] == "Sturdy"

    def test_all_fields_read_only(self):
        fields = ProductSerializer().fields
        assert all(field.read_only for field in fields.values())
