"""Product service layer (Use Cases).

Orchestrates the Product routes, delegating persistence to the injected
``IProductRepository``.  Existence is always checked before a mutation,
so a missing id raises ``ProductNotFound`` without touching the store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

# Primary keys are BigAutoField: ids outside this range cannot exist.
MAX_PRODUCT_ID = 2**63 - 1


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product in insertion order."""
        return self._repo.list()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        logger.info("product.retrieved", product_id=id)
        return product

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product; it always starts available."""
        return self._repo.create(name=dto.name, price=dto.price)

    @transaction.atomic
    def replace_product(self, id: int, dto: ReplaceProductDTO) -> Product:
        """Overwrite name, price and availability of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        return self._repo.replace(
            product,
            name=dto.name,
            price=dto.price,
            availability=dto.availability,
        )

    @transaction.atomic
    def toggle_availability(self, id: int) -> Product:
        """Flip the availability of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        return self._repo.toggle_availability(product)

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Permanently remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._id_in_range(id) or not self._repo.delete(id):
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _id_in_range(id: int) -> bool:
        return 0 < id <= MAX_PRODUCT_ID

    def _get_or_raise(self, id: int) -> Product:
        product = self._repo.get_by_id(id) if self._id_in_range(id) else None
        if product is None:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(id)
        return product
