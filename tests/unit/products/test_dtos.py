"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: validation, name trimming, frozen immutability.
- UpdateProductDTO: optional fields, ``id`` tolerance, fields-set tracking.
- PaginationDTO / ValidateProductsDTO: bounds.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import (
    MAX_PAGE,
    MAX_PAGE_LIMIT,
    MAX_PRODUCT_ID,
    CreateProductDTO,
    PaginationDTO,
    UpdateProductDTO,
    ValidateProductsDTO,
)

pytestmark = pytest.mark.unit


# ===========================================================================
# CreateProductDTO
# ===========================================================================


class TestCreateProductDTO:
    def test_valid_data(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("9.99"))
        assert dto.name == "Widget"
        assert dto.price == Decimal("9.99")
        assert dto.description == ""

    def test_price_from_string(self):
        dto = CreateProductDTO(name="Widget", price="12.50")
        assert dto.price == Decimal("12.50")

    def test_zero_price_allowed(self):
        assert CreateProductDTO(name="Freebie", price=Decimal("0")).price == 0

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than or equal"):
            CreateProductDTO(name="Widget", price=Decimal("-1.00"))

    def test_too_many_decimal_places_rejected(self):
        with pytest.raises(ValidationError, match="decimal places"):
            CreateProductDTO(name="Widget", price=Decimal("1.999"))

    @pytest.mark.parametrize("price", ["12345678901234.50", "1e20", Decimal("10000000000")])
    def test_price_beyond_column_precision_rejected(self, price):
        with pytest.raises(ValidationError, match="digits"):
            CreateProductDTO(name="Widget", price=price)

    def test_largest_storable_price_allowed(self):
        dto = CreateProductDTO(name="Widget", price="9999999999.99")
        assert dto.price == Decimal("9999999999.99")

    def test_name_longer_than_column_rejected(self):
        with pytest.raises(ValidationError, match="at most 255"):
            CreateProductDTO(name="x" * 256, price=Decimal("1.00"))

    def test_name_is_trimmed(self):
        assert CreateProductDTO(name="  Widget  ", price=1).name == "Widget"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            CreateProductDTO(name="   ", price=Decimal("1.00"))

    def test_missing_fields_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO.model_validate({"name": "Incomplete"})

    def test_is_frozen(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("1.00"))
        with pytest.raises(ValidationError):
            dto.name = "Other"


# ===========================================================================
# UpdateProductDTO
# ===========================================================================


class TestUpdateProductDTO:
    def test_all_fields_optional(self):
        dto = UpdateProductDTO()
        assert dto.model_fields_set == set()

    def test_tracks_fields_set(self):
        dto = UpdateProductDTO.model_validate({"name": "X", "id": 5})
        assert dto.model_fields_set == {"name", "id"}
        assert dto.id == 5

    def test_unknown_fields_ignored(self):
        dto = UpdateProductDTO.model_validate({"name": "X", "color": "red"})
        assert dto.model_fields_set == {"name"}

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(price=Decimal("-0.01"))

    def test_oversized_price_rejected(self):
        with pytest.raises(ValidationError, match="digits"):
            UpdateProductDTO.model_validate({"price": "1e20"})

    def test_name_longer_than_column_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="x" * 256)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="")


# ===========================================================================
# PaginationDTO / ValidateProductsDTO
# ===========================================================================


class TestPaginationDTO:
    def test_defaults(self):
        dto = PaginationDTO()
        assert dto.page == 1
        assert dto.limit == 10

    def test_parses_query_strings(self):
        dto = PaginationDTO.model_validate({"page": "3", "limit": "25"})
        assert (dto.page, dto.limit) == (3, 25)

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"page": -1}, {"limit": "abc"}])
    def test_rejects_non_positive(self, params):
        with pytest.raises(ValidationError):
            PaginationDTO.model_validate(params)

    def test_upper_bounds_inclusive(self):
        dto = PaginationDTO(page=MAX_PAGE, limit=MAX_PAGE_LIMIT)
        assert (dto.page, dto.limit) == (MAX_PAGE, MAX_PAGE_LIMIT)

    @pytest.mark.parametrize(
        "params",
        [
            {"page": MAX_PAGE + 1},
            {"limit": MAX_PAGE_LIMIT + 1},
            {"page": "99999999999999999999999"},
        ],
    )
    def test_rejects_above_upper_bound(self, params):
        with pytest.raises(ValidationError, match="less than or equal"):
            PaginationDTO.model_validate(params)


class TestValidateProductsDTO:
    def test_accepts_ids(self):
        assert ValidateProductsDTO(ids=[1, 1, 2]).ids == [1, 1, 2]

    def test_rejects_empty_list(self):
        with pytest.raises(ValidationError):
            ValidateProductsDTO(ids=[])

    def test_rejects_non_integer_ids(self):
        with pytest.raises(ValidationError):
            ValidateProductsDTO(ids=["abc"])

    def test_accepts_largest_bigint_id(self):
        assert ValidateProductsDTO(ids=[MAX_PRODUCT_ID]).ids == [MAX_PRODUCT_ID]

    @pytest.mark.parametrize("bad_id", [MAX_PRODUCT_ID + 1, 99999999999999999999999])
    def test_rejects_id_beyond_bigint(self, bad_id):
        with pytest.raises(ValidationError, match="less than or equal"):
            ValidateProductsDTO(ids=[1, bad_id])

    @pytest.mark.parametrize("bad_id", [0, -3])
    def test_rejects_non_positive_ids(self, bad_id):
        with pytest.raises(ValidationError, match="greater than 0"):
            ValidateProductsDTO(ids=[bad_id])
