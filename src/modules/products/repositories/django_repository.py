"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: they return ``None`` instead of
raising; the Service Layer decides how to report a missing entity.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_available(self, id: int) -> Optional[Product]:
        return Product.objects.available().filter(id=id).first()

    def count_available(self) -> int:
        return Product.objects.available().count()

    def list_available(self, offset: int, limit: int) -> List[Product]:
        """Slice of available products in default (id) order.

        An offset past the end yields an empty list.
        """
        return list(Product.objects.available()[offset : offset + limit])

    def find_by_ids(self, ids: Iterable[int]) -> List[Product]:
        return list(Product.objects.filter(id__in=list(ids)))

    @transaction.atomic
    def create(self, fields: Dict[str, Any]) -> Product:
        """Insert a product and return it with its generated id."""
        product = Product(**fields)
        product.save()
        return product

    @transaction.atomic
    def update(self, id: int, fields: Dict[str, Any]) -> Product:
        """Write ``fields`` to the product with ``id``.

        Raises ``Product.DoesNotExist`` when no row has that id; callers
        check existence first.
        """
        product = Product.objects.get(id=id)
        for field, value in fields.items():
            setattr(product, field, value)
        product.save(update_fields=list(fields))
        return product
