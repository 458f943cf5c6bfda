"""Unit tests for the Product model.

Covers:
- Creation defaults and UUIDv7 primary key.
- Field validation via full_clean.
- Price > 0 and stock >= 0 database constraints.
- __str__ representation.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.products.models import Product

pytestmark = pytest.mark.unit


def _build(**overrides) -> Product:
    defaults = {
        "name": "Widget",
        "price": Decimal("19.99"),
        "category": "Tools",
    }
    defaults.update(overrides)
    return Product(**defaults)


class TestProductCreation:
    def test_defaults(self):
        product = Product.objects.create(
            name="Widget", price=Decimal("19.99"), category="Tools"
        )
        product.refresh_from_db()
        assert product.stock == 0
        assert product.is_available is True
        assert product.description is None

    def test_id_is_uuid7(self, make_product):
        product = make_product()
        assert isinstance(product.id, uuid.UUID)
        assert product.id.version == 7

    def test_price_keeps_two_decimals(self, make_product):
        product = make_product(price=Decimal("10.50"))
        product.refresh_from_db()
        assert product.price == Decimal("10.50")

    def test_str(self):
        assert str(_build()) == "Widget (Tools)"


class TestProductValidation:
    def test_full_clean_accepts_valid_product(self):
        _build(description="A tool").full_clean()

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1.00")])
    def test_full_clean_rejects_non_positive_price(self, price):
        with pytest.raises(ValidationError) as exc_info:
            _build(price=price).full_clean()
        assert "price" in exc_info.value.message_dict

    def test_full_clean_rejects_negative_stock(self):
        with pytest.raises(ValidationError) as exc_info:
            _build(stock=-1).full_clean()
        assert "stock" in exc_info.value.message_dict

    def test_full_clean_rejects_short_category(self):
        with pytest.raises(ValidationError) as exc_info:
            _build(category="T").full_clean()
        assert "category" in exc_info.value.message_dict

    def test_full_clean_rejects_long_description(self):
        with pytest.raises(ValidationError) as exc_info:
            _build(description="x" * 1001).full_clean()
        assert "description" in exc_info.value.message_dict


class TestDatabaseConstraints:
    def test_zero_price_rejected_by_database(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            _build(price=Decimal("0")).save()

    def test_negative_stock_rejected_by_database(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            _build(stock=-5).save()
