# products/admin.py
"""
=====================================================
PATH: products/admin.py
=====================================================

Admin rules (audit-safe inventory):

- Products are catalogue rows; stock is never typed in here.
- Stock comes from the InventoryTransaction ledger, which is written only by
  purchase recording and finalized sales invoices.
- Ledger rows are view-only in admin (no add / change / delete).
"""

from __future__ import annotations

from django.contrib import admin

from products.models import InventoryTransaction, Product
from products.services.inventory import stock_for_product


# =====================================================
# PRODUCT
# =====================================================

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "sku",
        "name",
        "category",
        "sales_price",
        "gst_percent",
        "current_stock",
        "deleted_at",
        "created_at",
    )
    list_filter = ("category", "gender", "created_at")
    search_fields = ("sku", "name", "barcode", "hsn_code")
    ordering = ("-created_at",)
    readonly_fields = ("created_at", "updated_at")

    def current_stock(self, obj):
        return stock_for_product(obj.id)

    current_stock.short_description = "Stock"


# =====================================================
# INVENTORY LEDGER (VIEW-ONLY LIST)
# =====================================================

@admin.register(InventoryTransaction)
class InventoryTransactionAdmin(admin.ModelAdmin):
    list_display = ("product", "quantity", "ref_type", "ref_id", "created_by", "created_at")
    list_filter = ("ref_type", "created_at")
    search_fields = ("product__name", "product__sku")
    ordering = ("-created_at",)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
