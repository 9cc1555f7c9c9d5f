"""Unit tests for the Product model.

Covers:
- Creation defaults (availability, auto-increment id).
- Price > 0 validation (application + DB constraint).
- Hard delete and id non-reuse.
- __str__ representation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductCreation:
    def test_availability_defaults_to_true(self):
        p = Product.objects.create(name="Widget", price=Decimal("19.99"))
        assert p.availability is True

    def test_ids_are_assigned_incrementally(self):
        first = Product.objects.create(name="A", price=Decimal("1.00"))
        second = Product.objects.create(name="B", price=Decimal("2.00"))
        assert second.id > first.id

    def test_default_ordering_is_by_id(self):
        b = Product.objects.create(name="B", price=Decimal("1.00"))
        a = Product.objects.create(name="A", price=Decimal("1.00"))
        assert list(Product.objects.all()) == [b, a]


class TestProductPriceValidation:
    def test_full_clean_rejects_zero_price(self):
        p = Product(name="Widget", price=Decimal("0"))
        with pytest.raises(ValidationError) as exc_info:
            p.full_clean()
        assert "price" in exc_info.value.message_dict

    def test_full_clean_rejects_empty_name(self):
        p = Product(name="", price=Decimal("1.00"))
        with pytest.raises(ValidationError) as exc_info:
            p.full_clean()
        assert "name" in exc_info.value.message_dict

    def test_db_constraint_rejects_negative_price(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.create(name="Widget", price=Decimal("-1.00"))


class TestProductDeletion:
    def test_delete_removes_row(self):
        p = Product.objects.create(name="Widget", price=Decimal("5.00"))
        pk = p.pk
        p.delete()
        assert not Product.objects.filter(pk=pk).exists()

    def test_deleted_id_is_not_reused(self):
        first = Product.objects.create(name="A", price=Decimal("1.00"))
        first_id = first.id
        first.delete()
        second = Product.objects.create(name="B", price=Decimal("1.00"))
        assert second.id != first_id


class TestProductStr:
    def test_str(self):
        p = Product.objects.create(name="Widget", price=Decimal("5.00"))
        assert str(p) == f"#{p.pk} Widget"
