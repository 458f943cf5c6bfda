"""Unit tests for ProductService.

Covers:
- create_product: happy path, defaults, database failure.
- update_product: partial update, not found.
- update_stock: negative value rejected before any look-up, not found,
  single-column write.
- soft_delete_product / hard_delete_product / remove_product.
- Filtered listings: available, category, price range, low stock.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from django.db import DatabaseError

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import (
    InvalidPriceRange,
    InvalidStock,
    InvalidStockThreshold,
    ProductCreationFailed,
    ProductNotFound,
)
from modules.products.models import Product
from modules.products.services import DEFAULT_LOW_STOCK_THRESHOLD, ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _product(**overrides) -> Product:
    defaults = {
        "name": "Widget",
        "description": "Original desc",
        "price": Decimal("19.99"),
        "stock": 10,
        "category": "Tools",
        "is_available": True,
    }
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success(self, service, mock_repo):
        mock_repo.save.side_effect = lambda p: p

        dto = CreateProductDTO(name="Widget", price=Decimal("19.99"), category="Tools")
        product = service.create_product(dto)

        assert product.name == "Widget"
        assert product.price == Decimal("19.99")
        assert product.stock == 0
        assert product.is_available is True
        assert product.description is None
        mock_repo.save.assert_called_once()

    def test_database_error_is_bad_request(self, service, mock_repo):
        mock_repo.save.side_effect = DatabaseError("boom")

        dto = CreateProductDTO(name="Widget", price=Decimal("19.99"), category="Tools")
        with pytest.raises(ProductCreationFailed):
            service.create_product(dto)


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_partial_update_preserves_other_fields(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()
        mock_repo.save.side_effect = lambda p: p

        product = service.update_product("some-id", UpdateProductDTO(price=Decimal("39.99")))

        assert product.price == Decimal("39.99")
        assert product.name == "Widget"
        assert product.description == "Original desc"
        assert product.stock == 10
        assert product.is_available is True

    def test_explicit_null_clears_description(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()
        mock_repo.save.side_effect = lambda p: p

        product = service.update_product(
            "some-id", UpdateProductDTO.model_validate({"description": None})
        )

        assert product.description is None

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.update_product("missing", UpdateProductDTO(name="Ghost"))


# ===========================================================================
# update_stock
# ===========================================================================


class TestUpdateStock:
    def test_sets_stock_only(self, service, mock_repo):
        existing = _product(stock=3)
        mock_repo.get_by_id.return_value = existing
        mock_repo.save.side_effect = lambda p, update_fields=None: p

        product = service.update_stock("some-id", 25)

        assert product.stock == 25
        mock_repo.save.assert_called_once_with(existing, update_fields=["stock"])

    def test_zero_is_allowed(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()
        mock_repo.save.side_effect = lambda p, update_fields=None: p

        assert service.update_stock("some-id", 0).stock == 0

    def test_negative_raises_before_lookup(self, service, mock_repo):
        with pytest.raises(InvalidStock):
            service.update_stock("some-id", -1)

        mock_repo.get_by_id.assert_not_called()
        mock_repo.save.assert_not_called()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.update_stock("missing", 5)


# ===========================================================================
# Deletion
# ===========================================================================


class TestDeletion:
    def test_soft_delete_marks_unavailable(self, service, mock_repo):
        existing = _product()
        mock_repo.get_by_id.return_value = existing

        service.soft_delete_product("some-id")

        assert existing.is_available is False
        mock_repo.save.assert_called_once_with(existing, update_fields=["is_available"])
        mock_repo.delete.assert_not_called()

    def test_hard_delete_removes_row(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()

        service.hard_delete_product("some-id")

        mock_repo.delete.assert_called_once_with("some-id")

    def test_remove_is_a_permanent_delete(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()

        service.remove_product("some-id")

        mock_repo.delete.assert_called_once_with("some-id")
        mock_repo.save.assert_not_called()

    @pytest.mark.parametrize(
        "method", ["soft_delete_product", "hard_delete_product", "remove_product"]
    )
    def test_not_found_raises(self, service, mock_repo, method):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            getattr(service, method)("missing")

        mock_repo.delete.assert_not_called()


# ===========================================================================
# Listings
# ===========================================================================


class TestListings:
    def test_list_products_newest_first(self, service, mock_repo):
        service.list_products()
        mock_repo.list.assert_called_once_with(ordering=("-created_at", "-id"))

    def test_available_ordered_by_name(self, service, mock_repo):
        service.list_available_products()
        mock_repo.list.assert_called_once_with({"is_available": True}, ordering=("name",))

    def test_category_exact_match(self, service, mock_repo):
        service.list_by_category("Tools")
        mock_repo.list.assert_called_once_with(
            {"category": "Tools"}, ordering=("-created_at", "-id")
        )

    def test_price_range_inclusive_lookups(self, service, mock_repo):
        service.list_by_price_range(Decimal("10"), Decimal("20"))
        mock_repo.list.assert_called_once_with(
            {"price__gte": Decimal("10"), "price__lte": Decimal("20")},
            ordering=("price", "name"),
        )

    def test_price_range_inverted_raises(self, service, mock_repo):
        with pytest.raises(InvalidPriceRange):
            service.list_by_price_range(Decimal("20"), Decimal("10"))
        mock_repo.list.assert_not_called()

    def test_price_range_negative_raises(self, service, mock_repo):
        with pytest.raises(InvalidPriceRange):
            service.list_by_price_range(Decimal("-1"), Decimal("10"))

    def test_low_stock_with_threshold(self, service, mock_repo):
        service.list_low_stock(5)
        mock_repo.list.assert_called_once_with(
            {"stock__lte": 5}, ordering=("stock", "name")
        )

    def test_low_stock_default_threshold(self, service, mock_repo):
        service.list_low_stock()
        mock_repo.list.assert_called_once_with(
            {"stock__lte": DEFAULT_LOW_STOCK_THRESHOLD}, ordering=("stock", "name")
        )

    def test_low_stock_configured_default(self, mock_repo):
        ProductService(repository=mock_repo, low_stock_threshold=3).list_low_stock()
        mock_repo.list.assert_called_once_with(
            {"stock__lte": 3}, ordering=("stock", "name")
        )

    def test_low_stock_negative_threshold_raises(self, service, mock_repo):
        with pytest.raises(InvalidStockThreshold):
            service.list_low_stock(-1)
