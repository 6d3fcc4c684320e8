"""Product domain exceptions.

Raised by the Service Layer when a lookup fails.  Each exception carries
the message and status code that cross the service boundary; the API
layer (Views) renders them unchanged via ``to_dict()``.
"""

from __future__ import annotations

from typing import Any, Dict

from rest_framework import status


class CatalogError(Exception):
    """Base class for structured catalog errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "status": self.status_code}


class ProductNotFound(CatalogError):
    """The requested product does not exist or has been soft-deleted."""

    def __init__(self, id: int) -> None:
        super().__init__(f"Product #{id} not found")
        self.id = id


class ProductsNotFound(CatalogError):
    """One or more ids in a validation batch matched no product."""

    def __init__(self) -> None:
        super().__init__("One or more products were not found")
