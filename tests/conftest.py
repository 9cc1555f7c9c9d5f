import pytest

from rest_framework.test import APIClient

from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def make_product():
    """Factory persisting a Product with sensible defaults."""

    def _make(**overrides) -> Product:
        defaults = {"name": "Monitor Curvo", "price": "350.00"}
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make
