# products/views/__init__.py

from .product import ProductViewSet

__all__ = [
    "ProductViewSet",
]
