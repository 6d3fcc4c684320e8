"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``PaginationDTO``: page / limit for listings.
- ``ValidateProductsDTO``: id batch for existence checks.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, List

from decouple import config
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PAGE_LIMIT = config("DEFAULT_PAGE_LIMIT", default=10, cast=int)
MAX_PAGE_LIMIT = 1000
MAX_PAGE = 1_000_000_000

# Largest value a BIGINT primary key can hold.
MAX_PRODUCT_ID = 2**63 - 1

# Mirrors Product.price (max_digits=12, decimal_places=2) and Product.name.
Price = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=2)]
Name = Annotated[str, Field(max_length=255)]
ProductId = Annotated[int, Field(gt=0, le=MAX_PRODUCT_ID)]


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string of at most 255 characters.
    - ``price`` is non-negative and fits 12 digits with 2 decimal places.
    """

    model_config = ConfigDict(frozen=True)

    name: Name
    price: Price
    description: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only fields the caller actually set are
    applied (``model_fields_set``).  ``id`` is accepted so that payloads
    echoing it validate, but the service never writes it.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: Name | None = None
    price: Price | None = None
    description: str | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip() if v is not None else v


class PaginationDTO(BaseModel):
    """Page position for listings; both values are 1-based and bounded."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, gt=0, le=MAX_PAGE)
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, gt=0, le=MAX_PAGE_LIMIT)


class ValidateProductsDTO(BaseModel):
    """Batch of product ids whose existence must be confirmed."""

    model_config = ConfigDict(frozen=True)

    ids: List[ProductId] = Field(min_length=1)

