"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that domain-specific
repository interfaces extend.  Service-layer code depends on this
abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the repository
    (e.g. ``Product``).  Primary keys are store-generated integers.
    """

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> T:
        """Insert a new row and return it with its generated key."""

    @abstractmethod
    def update(self, id: int, fields: Dict[str, Any]) -> T:
        """Apply ``fields`` to the row with ``id`` and return the result."""
