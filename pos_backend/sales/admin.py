# sales/admin.py

from django.contrib import admin

from sales.models import SalesInvoice, SalesInvoiceItem


# ======================================================
# SALES INVOICE ADMIN
# ======================================================


class SalesInvoiceItemInline(admin.TabularInline):
    model = SalesInvoiceItem
    extra = 0
    can_delete = False
    fields = (
        "product",
        "quantity",
        "sales_rate",
        "discount_amount",
        "gst_amount",
        "line_total",
        "deleted_at",
    )
    readonly_fields = fields


@admin.register(SalesInvoice)
class SalesInvoiceAdmin(admin.ModelAdmin):
    list_display = (
        "invoice_number",
        "status",
        "customer_name",
        "total_invoice_amount",
        "created_at",
        "deleted_at",
    )
    readonly_fields = (
        "invoice_number",
        "total_amount_before_discount",
        "total_discount",
        "taxable_amount",
        "total_gst",
        "round_off",
        "total_invoice_amount",
        "invoice_pdf_key",
        "created_at",
        "updated_at",
    )
    search_fields = ("invoice_number", "customer_name", "customer_mobile")
    list_filter = ("status", "created_at")
    inlines = [SalesInvoiceItemInline]
