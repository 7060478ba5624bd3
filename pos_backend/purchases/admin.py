# purchases/admin.py

"""
PURCHASES ADMIN

- Suppliers are editable master data.
- Purchase invoices are recorded through the API (ledger rows are written there),
  so admin shows them read-only with their lines inline.
"""

from __future__ import annotations

from django.contrib import admin

from purchases.models import PurchaseInvoice, PurchaseInvoiceItem, Supplier


@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    list_display = ("name", "contact_info", "deleted_at", "created_at")
    search_fields = ("name", "contact_info")
    ordering = ("-created_at",)


class PurchaseInvoiceItemInline(admin.TabularInline):
    model = PurchaseInvoiceItem
    extra = 0
    can_delete = False
    fields = ("product", "quantity", "purchase_price", "gst_percent", "gst_amount", "line_total")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(PurchaseInvoice)
class PurchaseInvoiceAdmin(admin.ModelAdmin):
    list_display = (
        "invoice_number",
        "supplier",
        "total_items",
        "total_quantity",
        "total_invoice_amount",
        "created_by",
        "created_at",
    )
    list_filter = ("created_at",)
    search_fields = ("invoice_number", "supplier__name")
    ordering = ("-created_at",)
    inlines = [PurchaseInvoiceItemInline]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
