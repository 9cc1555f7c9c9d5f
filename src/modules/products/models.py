"""Product model.

Business rules implemented:
- Price must be greater than zero (validator + database check constraint).
- Availability defaults to ``True`` and can be flipped on its own.
- Deletion is physical: there is no soft-delete state.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models


class Product(models.Model):
    """Product aggregate root.

    ``id`` is an auto-increment integer assigned by the database and never
    reused, so a deleted product's id does not come back.
    """

    name = models.CharField(max_length=255)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    availability = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    def clean(self) -> None:
        super().clean()
        if not self.name:
            raise ValidationError({"name": "Name must not be empty."})
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": "Price must be greater than zero."})

    def __str__(self) -> str:
        return f"#{self.pk} {self.name}"
