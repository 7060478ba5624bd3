# sales/models/sales_invoice_item.py

from decimal import Decimal

from django.db import models

from backend.db import SoftDeleteModel
from products.models import Product

from .sales_invoice import SalesInvoice


class SalesInvoiceItem(SoftDeleteModel):
    """
    One invoice line (price + tax snapshot).

    Lines are never edited in place: a DRAFT update soft-deletes the live
    lines and inserts the new set.
    """

    sales_invoice = models.ForeignKey(
        SalesInvoice,
        on_delete=models.CASCADE,
        related_name="items",
    )
    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="sales_invoice_items",
    )

    quantity = models.PositiveIntegerField()
    mrp = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    sales_rate = models.DecimalField(max_digits=12, decimal_places=2)

    discount_type = models.CharField(max_length=16, blank=True, default="")
    discount_value = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )
    discount_amount = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )

    gst_percent = models.DecimalField(
        max_digits=5, decimal_places=2, default=Decimal("0.00")
    )
    gst_amount = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    line_total = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["sales_invoice", "deleted_at"], name="sales_item_invoice_live_idx"),
        ]

    def __str__(self):
        product_name = getattr(self.product, "name", "Product")
        return f"{product_name} x {self.quantity}"
