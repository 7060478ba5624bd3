# products/serializers/product.py

"""
PRODUCT SERIALIZERS

- Write: catalogue fields only (stock is never written directly)
- List:  compact row for pickers / POS search
- Detail: every catalogue field + ledger-derived stock
"""

from decimal import Decimal

from rest_framework import serializers

from products.models import Product
from products.services.inventory import stock_for_product


class ProductWriteSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = [
            "name",
            "sku",
            "barcode",
            "hsn_code",
            "gender",
            "category",
            "purchase_price",
            "sales_price",
            "gst_percent",
        ]
        extra_kwargs = {
            "purchase_price": {"min_value": Decimal("0.00")},
            "sales_price": {"min_value": Decimal("0.00")},
            "gst_percent": {"min_value": Decimal("0.00")},
        }

    def validate_name(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("name is required")
        return value

    def validate_sku(self, value):
        return (value or "").strip().upper()


class ProductListSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = ["id", "name", "sku", "barcode", "category", "gender", "sales_price"]


class ProductDetailSerializer(serializers.ModelSerializer):
    """
    Stock is aggregated from the inventory ledger (single source of truth).
    """

    stock = serializers.SerializerMethodField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "sku",
            "barcode",
            "hsn_code",
            "gender",
            "category",
            "purchase_price",
            "sales_price",
            "gst_percent",
            "stock",
        ]

    def get_stock(self, obj) -> int:
        return stock_for_product(obj.id)
