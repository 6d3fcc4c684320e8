"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Catalog exceptions are caught and rendered with their own message and
status; the view never swallows generic exceptions.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import (
    MAX_PRODUCT_ID,
    CreateProductDTO,
    PaginationDTO,
    UpdateProductDTO,
    ValidateProductsDTO,
)
from modules.products.exceptions import CatalogError, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductPageSerializer, ProductSerializer
from modules.products.services import ProductService


def _invalid(exc: Exception) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)


def _catalog_error(exc: CatalogError) -> Response:
    return Response(exc.to_dict(), status=exc.status_code)


def _product_id(pk: str) -> int:
    """Parse a routed id; values no BIGINT can hold name no product."""
    id = int(pk)
    if id > MAX_PRODUCT_ID:
        raise ProductNotFound(id)
    return id


class ProductViewSet(GenericViewSet):
    """ViewSet for the catalog operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Product.objects.available()
    serializer_class = ProductSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/?page=&limit="""
        try:
            pagination = PaginationDTO.model_validate(request.query_params.dict())
        except PydanticValidationError as exc:
            return _invalid(exc)

        page = self._service.list_products(pagination)
        return Response(ProductPageSerializer(page).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product = self._service.get_product(_product_id(pk))
        except CatalogError as exc:
            return _catalog_error(exc)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        try:
            dto = CreateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _invalid(exc)

        product = self._service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/products/{pk}/"""
        try:
            dto = UpdateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _invalid(exc)

        try:
            product = self._service.update_product(_product_id(pk), dto)
        except CatalogError as exc:
            return _catalog_error(exc)
        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/ (soft delete, returns the record)."""
        try:
            product = self._service.delete_product(_product_id(pk))
        except CatalogError as exc:
            return _catalog_error(exc)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Bulk validation
    # ------------------------------------------------------------------

    @action(detail=False, methods=["post"], url_path="validate")
    def validate(self, request: Request) -> Response:
        """POST /api/v1/products/validate/

        Accepts ``{"ids": [1, 2, ...]}`` or a bare id list and returns the
        matching products.
        """
        payload = request.data
        if isinstance(payload, list):
            payload = {"ids": payload}
        try:
            dto = ValidateProductsDTO.model_validate(payload)
        except PydanticValidationError as exc:
            return _invalid(exc)

        try:
            products = self._service.validate_products(dto.ids)
        except CatalogError as exc:
            return _catalog_error(exc)
        return Response(ProductSerializer(products, many=True).data)
