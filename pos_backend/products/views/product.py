# products/views/product.py

"""
PRODUCT VIEWSET

Purpose:
- Staff product catalogue endpoints: create, list, detail.
- Responses use the project envelope ({code, data, message}).
- Soft-deleted products are invisible everywhere.
"""

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated

from backend.params import parse_positive_id
from backend.responses import error_response, success_response
from permissions.roles import IsStaff
from products.models import Product
from products.serializers import (
    ProductDetailSerializer,
    ProductListSerializer,
    ProductWriteSerializer,
)

logger = logging.getLogger(__name__)


class ProductViewSet(viewsets.GenericViewSet):
    """
    Product endpoints.

    - POST /api/products/
    - GET  /api/products/
    - GET  /api/products/<id>/
    """

    permission_classes = [IsAuthenticated, IsStaff]
    serializer_class = ProductWriteSerializer

    def get_queryset(self):
        return Product.objects.alive().order_by("-created_at")

    @extend_schema(
        request=ProductWriteSerializer,
        responses={201: OpenApiResponse(description="Product created")},
    )
    def create(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()

        logger.info("Product created", extra={"product_id": product.id, "sku": product.sku})

        return success_response(
            {"id": product.id},
            "Product created",
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(responses={200: ProductListSerializer(many=True)})
    def list(self, request):
        data = ProductListSerializer(self.get_queryset(), many=True).data
        return success_response(data, "Products fetched successfully")

    @extend_schema(
        responses={
            200: ProductDetailSerializer,
            400: OpenApiResponse(description="invalid product id"),
            404: OpenApiResponse(description="product not found"),
        },
    )
    def retrieve(self, request, pk=None):
        product_id = parse_positive_id(pk)
        if product_id is None:
            return error_response("invalid product id", status.HTTP_400_BAD_REQUEST)

        product = self.get_queryset().filter(id=product_id).first()
        if product is None:
            return error_response("product not found", status.HTTP_404_NOT_FOUND)

        return success_response(
            ProductDetailSerializer(product).data,
            "Product details fetched successfully",
        )
