"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views).
Input validation lives in the Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "is_available",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class PaginationMetadataSerializer(serializers.Serializer):
    page = serializers.IntegerField()
    total_rows = serializers.IntegerField()
    total_pages = serializers.IntegerField()


class ProductPageSerializer(serializers.Serializer):
    """Envelope for ``ProductService.list_products`` results."""

    data = ProductSerializer(many=True)
    metadata = PaginationMetadataSerializer()
