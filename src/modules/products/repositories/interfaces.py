"""Product repository interface.

Extends ``IRepository[Product]`` with the write operations of the Product
routes.  Each method maps to a single store operation.
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def create(self, name: str, price: Decimal) -> Product:
        """Insert a new, available product and return it with its id."""

    @abstractmethod
    def replace(
        self, product: Product, name: str, price: Decimal, availability: bool
    ) -> Product:
        """Overwrite every mutable field of an existing product."""

    @abstractmethod
    def toggle_availability(self, product: Product) -> Product:
        """Flip ``availability`` on an existing product."""
