"""Product DRF serializer for API output.

Input is validated by the route rule sets and the Pydantic DTOs from
``dtos.py``; this serializer only renders ``Product`` instances.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "price", "availability"]
        read_only_fields = fields
