"""Unit tests for ProductDjangoRepository.

Covers:
- get_by_id with valid, missing and malformed IDs.
- list with range look-ups and ordering.
- save with update_fields.
- delete (permanent).
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


class TestGetById:
    def test_returns_product_when_found(self, repo, make_product):
        product = make_product()
        assert repo.get_by_id(str(product.id)).id == product.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id("00000000-0000-0000-0000-000000000000") is None

    def test_returns_none_for_invalid_uuid(self, repo):
        assert repo.get_by_id("not-a-uuid") is None


class TestList:
    def test_returns_empty_list_when_no_products(self, repo):
        assert repo.list() == []

    def test_price_range_is_inclusive(self, repo, make_product):
        make_product(name="Cheap", price=Decimal("5.00"))
        make_product(name="Low", price=Decimal("10.00"))
        make_product(name="High", price=Decimal("20.00"))
        make_product(name="Pricey", price=Decimal("25.00"))

        results = repo.list(
            {"price__gte": Decimal("10"), "price__lte": Decimal("20")},
            ordering=("price", "name"),
        )

        assert [p.name for p in results] == ["Low", "High"]

    def test_low_stock_ordering(self, repo, make_product):
        make_product(name="Bolt", stock=3)
        make_product(name="Anvil", stock=3)
        make_product(name="Nail", stock=1)
        make_product(name="Plenty", stock=50)

        results = repo.list({"stock__lte": 3}, ordering=("stock", "name"))

        assert [p.name for p in results] == ["Nail", "Anvil", "Bolt"]


class TestSave:
    def test_inserts_new_product(self, repo):
        product = repo.save(
            Product(name="Gadget", price=Decimal("9.99"), category="Tools")
        )
        assert Product.objects.filter(id=product.id).exists()

    def test_update_fields_limits_written_columns(self, repo, make_product):
        product = make_product(name="Original", stock=4)
        product.name = "Not persisted"
        product.stock = 12
        repo.save(product, update_fields=["stock"])
        product.refresh_from_db()
        assert product.stock == 12
        assert product.name == "Original"


class TestDelete:
    def test_removes_row(self, repo, make_product):
        product = make_product()
        assert repo.delete(str(product.id)) is True
        assert not Product.objects.filter(id=product.id).exists()

    def test_returns_false_for_nonexistent(self, repo):
        assert repo.delete("00000000-0000-0000-0000-000000000000") is False
