"""Product repository interface.

Extends ``IRepository[Product]`` with the availability-aware look-ups
the catalog operations need.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_available(self, id: int) -> Optional[Product]:
        """Retrieve a product by id only if it is available."""

    @abstractmethod
    def count_available(self) -> int:
        """Count available products."""

    @abstractmethod
    def list_available(self, offset: int, limit: int) -> List[Product]:
        """Return up to ``limit`` available products starting at ``offset``."""

    @abstractmethod
    def find_by_ids(self, ids: Iterable[int]) -> List[Product]:
        """Return every product whose id is in ``ids``, available or not."""
