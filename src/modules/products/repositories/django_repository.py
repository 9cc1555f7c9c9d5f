"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
(and ``delete`` returns ``False``) instead of raising; the Service Layer
decides how to translate a missing entity into an API response.
Database errors are not caught here.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

import structlog

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, or ``None``."""
        return Product.objects.filter(pk=id).first()

    def list(self) -> List[Product]:
        return list(Product.objects.order_by("id"))

    def create(self, name: str, price: Decimal) -> Product:
        product = Product.objects.create(name=name, price=price, availability=True)
        logger.info("product.created", product_id=product.pk, name=product.name)
        return product

    def replace(
        self, product: Product, name: str, price: Decimal, availability: bool
    ) -> Product:
        product.name = name
        product.price = price
        product.availability = availability
        product.save(update_fields=["name", "price", "availability"])
        logger.info("product.replaced", product_id=product.pk)
        return product

    def toggle_availability(self, product: Product) -> Product:
        product.availability = not product.availability
        product.save(update_fields=["availability"])
        logger.info(
            "product.availability_toggled",
            product_id=product.pk,
            availability=product.availability,
        )
        return product

    def delete(self, id: int) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.
        """
        deleted, _ = Product.objects.filter(pk=id).delete()
        if deleted:
            logger.info("product.deleted", product_id=id)
        return bool(deleted)
