# products/serializers/__init__.py

from .product import ProductDetailSerializer, ProductListSerializer, ProductWriteSerializer

__all__ = [
    "ProductDetailSerializer",
    "ProductListSerializer",
    "ProductWriteSerializer",
]
