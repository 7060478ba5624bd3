# sales/serializers/invoice.py

"""
SALES INVOICE SERIALIZERS

Input (create + update share one payload):
    {"invoice": {...header...}, "items": [{...line...}, ...]}

Output:
- header / item blocks for the detail endpoint
- compact rows for the list endpoint

Totals are NEVER accepted from the client.
"""

from decimal import Decimal

from rest_framework import serializers

from backend.formats import format_datetime
from products.models import Product
from sales.models import SalesInvoice, SalesInvoiceItem


# ============================================================
# INPUT
# ============================================================


class SalesInvoiceItemInputSerializer(serializers.Serializer):
    product_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1)
    mrp = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, default=Decimal("0.00")
    )
    sales_rate = serializers.DecimalField(max_digits=12, decimal_places=2)
    discount_type = serializers.CharField(
        max_length=16, required=False, allow_blank=True, trim_whitespace=False, default=""
    )
    discount_value = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, default=Decimal("0.00")
    )
    gst_percent = serializers.DecimalField(
        max_digits=5, decimal_places=2, required=False, default=Decimal("0.00")
    )


class SalesInvoiceHeaderInputSerializer(serializers.Serializer):
    customer_name = serializers.CharField(
        max_length=255, required=False, allow_blank=True, default=""
    )
    customer_mobile = serializers.CharField(
        max_length=32, required=False, allow_blank=True, default=""
    )
    payment_mode = serializers.CharField(
        max_length=32, required=False, allow_blank=True, default=""
    )
    # Any JSON value; interpreted by invoice_service.parse_boolish.
    is_confirmed = serializers.JSONField(required=False, allow_null=True, default=False)


class SalesInvoiceUpsertSerializer(serializers.Serializer):
    invoice = SalesInvoiceHeaderInputSerializer(required=False, allow_null=True)
    items = SalesInvoiceItemInputSerializer(many=True, allow_empty=False)

    def validate_items(self, items):
        product_ids = {it["product_id"] for it in items}
        found = set(
            Product.objects.alive()
            .filter(id__in=product_ids)
            .values_list("id", flat=True)
        )
        missing = sorted(product_ids - found)
        if missing:
            raise serializers.ValidationError(
                f"product not found: {', '.join(str(pid) for pid in missing)}"
            )
        return items

    def header(self) -> dict:
        return dict(self.validated_data.get("invoice") or {})


# ============================================================
# OUTPUT
# ============================================================


class SalesInvoiceHeaderSerializer(serializers.ModelSerializer):
    created_at = serializers.SerializerMethodField()

    class Meta:
        model = SalesInvoice
        fields = [
            "id",
            "invoice_number",
            "customer_name",
            "customer_mobile",
            "status",
            "total_amount_before_discount",
            "total_discount",
            "taxable_amount",
            "total_gst",
            "total_invoice_amount",
            "payment_mode",
            "created_at",
            "invoice_pdf_key",
        ]

    def get_created_at(self, obj) -> str:
        return format_datetime(obj.created_at)


class SalesInvoiceItemSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source="product.name", read_only=True)

    class Meta:
        model = SalesInvoiceItem
        fields = [
            "id",
            "product_name",
            "quantity",
            "sales_rate",
            "discount_amount",
            "gst_percent",
            "gst_amount",
            "line_total",
        ]


class SalesInvoiceListSerializer(serializers.ModelSerializer):
    created_at = serializers.SerializerMethodField()

    class Meta:
        model = SalesInvoice
        fields = [
            "id",
            "invoice_number",
            "customer_name",
            "customer_mobile",
            "status",
            "total_invoice_amount",
            "created_at",
        ]

    def get_created_at(self, obj) -> str:
        return format_datetime(obj.created_at)
