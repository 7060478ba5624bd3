# purchases/api/serializers.py

from decimal import Decimal

from rest_framework import serializers

from backend.formats import format_datetime
from purchases.models import PurchaseInvoice, Supplier


# ---------------- SUPPLIERS ----------------
class SupplierSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=200)
    contact_info = serializers.CharField(allow_blank=True, default="")
    created_at = serializers.SerializerMethodField()

    class Meta:
        model = Supplier
        fields = ["id", "name", "contact_info", "created_at"]
        read_only_fields = ("id",)

    def validate_name(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("name is required")
        return value

    def get_created_at(self, obj) -> str:
        return format_datetime(obj.created_at)


# ---------------- PURCHASES (INPUT) ----------------
class PurchaseItemCreateSerializer(serializers.Serializer):
    product_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1)
    purchase_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0.00")
    )
    gst_percent = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=Decimal("0.00"), default=Decimal("0.00")
    )


class PurchaseCreateSerializer(serializers.Serializer):
    supplier_id = serializers.IntegerField(min_value=1)
    invoice_number = serializers.CharField(max_length=64, allow_blank=True, default="")
    notes = serializers.CharField(allow_blank=True, default="")
    # Emptiness is reported by the recording service ("at least one item is required").
    items = PurchaseItemCreateSerializer(many=True, required=False)


# ---------------- PURCHASES (OUTPUT) ----------------
class PurchaseListSerializer(serializers.ModelSerializer):
    supplier_name = serializers.CharField(source="supplier.name", read_only=True)
    created_at = serializers.SerializerMethodField()

    class Meta:
        model = PurchaseInvoice
        fields = ["id", "invoice_number", "supplier_name", "created_at"]

    def get_created_at(self, obj) -> str:
        return format_datetime(obj.created_at)
