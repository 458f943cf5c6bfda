from decimal import Decimal

import pytest

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def make_user():
    """Factory persisting a User; keyword arguments override the defaults."""
    from modules.users.models import User

    def _make(**overrides) -> User:
        defaults = {
            "name": "Ana Ruiz",
            "email": "ana@example.com",
        }
        defaults.update(overrides)
        return User.objects.create(**defaults)

    return _make


@pytest.fixture()
def make_product():
    """Factory persisting a Product; keyword arguments override the defaults."""
    from modules.products.models import Product

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Widget",
            "price": Decimal("19.99"),
            "stock": 10,
            "category": "Tools",
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make
