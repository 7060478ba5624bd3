"""
PATH: products/models/__init__.py

Products models export surface.
"""

from .inventory_transaction import InventoryTransaction
from .product import Product

__all__ = [
    "InventoryTransaction",
    "Product",
]
