"""Unit tests for the Product DRF serializer."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


class TestProductSerializer:
    def test_fields(self):
        assert set(ProductSerializer().fields) == {"id", "name", "price", "availability"}

    def test_all_fields_read_only(self):
        assert all(f.read_only for f in ProductSerializer().fields.values())

    def test_serializes_instance(self):
        p = Product.objects.create(name="Widget", price=Decimal("19.99"))
        data = ProductSerializer(p).data
        assert data["id"] == p.id
        assert data["name"] == "Widget"
        assert data["price"] == Decimal("19.99")
        assert data["availability"] is True
