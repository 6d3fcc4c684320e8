"""Product service layer (Use Cases).

Orchestrates the catalog operations for the Product aggregate,
delegating persistence to the injected ``IProductRepository``.

Rules enforced here:
- Reads, updates and removals only see available products.
- Removal is a soft delete (``is_available = False``).
- ``id`` is never writable through an update.
- Bulk validation ignores availability and fails on any missing id.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Dict, Iterable, List

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound, ProductsNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, PaginationDTO, UpdateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Insert a new product; the store assigns its id."""
        product = self._repo.create(dto.model_dump())
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Apply the fields the caller set, except ``id``.

        Raises:
            ProductNotFound: if no available product has this id.
        """
        product = self.get_product(id)

        data = dto.model_dump(exclude_unset=True, exclude_none=True, exclude={"id"})
        if not data:
            return product

        product = self._repo.update(id, data)
        logger.info("product.updated", product_id=id, fields=sorted(data))
        return product

    @transaction.atomic
    def delete_product(self, id: int) -> Product:
        """Soft-delete a product and return the updated record.

        Raises:
            ProductNotFound: if no available product has this id.
        """
        self.get_product(id)
        product = self._repo.update(id, {"is_available": False})
        logger.info("product.soft_deleted", product_id=id)
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, pagination: PaginationDTO) -> Dict[str, Any]:
        """Return one page of available products with pagination metadata."""
        page, limit = pagination.page, pagination.limit
        total_rows = self._repo.count_available()
        total_pages = math.ceil(total_rows / limit)

        return {
            "data": self._repo.list_available(offset=(page - 1) * limit, limit=limit),
            "metadata": {
                "page": page,
                "total_rows": total_rows,
                "total_pages": total_pages,
            },
        }

    def get_product(self, id: int) -> Product:
        """Retrieve a single available product by id.

        Raises:
            ProductNotFound: if the product does not exist or was removed.
        """
        product = self._repo.get_available(id)
        if not product:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(id)
        return product

    def validate_products(self, ids: Iterable[int]) -> List[Product]:
        """Confirm that every id in ``ids`` names a stored product.

        Duplicates are collapsed.  Soft-deleted products still count as
        existing.

        Raises:
            ProductsNotFound: if any unique id matches no row.
        """
        unique_ids = set(ids)
        products = self._repo.find_by_ids(unique_ids)

        if len(products) != len(unique_ids):
            found = {product.id for product in products}
            logger.warning(
                "product.validation_failed",
                requested=len(unique_ids),
                missing=sorted(unique_ids - found),
            )
            raise ProductsNotFound()

        return products
