# purchases/models.py

from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from backend.db import SoftDeleteModel
from products.models.product import Product

User = settings.AUTH_USER_MODEL


class Supplier(SoftDeleteModel):
    """
    Supplier master.
    """

    name = models.CharField(max_length=200)
    contact_info = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["name"], name="purchases_supplier_name_idx"),
        ]

    def __str__(self):
        return self.name


class PurchaseInvoice(SoftDeleteModel):
    """
    Supplier invoice header (stock-in document).

    Recording is performed by services.recording_service:
    - header + lines + one +quantity ledger row per line, in one transaction
    - totals are computed server-side; discount_amount is kept at 0
    """

    invoice_number = models.CharField(max_length=64, blank=True, default="")

    supplier = models.ForeignKey(
        Supplier,
        on_delete=models.PROTECT,
        related_name="invoices",
    )

    total_amount_before_discount = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    discount_amount = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    total_gst = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    total_invoice_amount = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    total_items = models.PositiveIntegerField(default=0)
    total_quantity = models.PositiveIntegerField(default=0)

    notes = models.TextField(blank=True, default="")

    created_by = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="purchase_invoices_created",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(total_invoice_amount__gte=Decimal("0.00")),
                name="purchase_invoice_total_nonnegative",
            ),
        ]
        indexes = [
            models.Index(fields=["supplier", "invoice_number"], name="purchases_inv_supplier_idx"),
            models.Index(fields=["created_at"], name="purchases_inv_created_idx"),
        ]

    def __str__(self):
        return f"{self.invoice_number or self.id} ({self.supplier})"


class PurchaseInvoiceItem(models.Model):
    purchase_invoice = models.ForeignKey(
        PurchaseInvoice,
        on_delete=models.CASCADE,
        related_name="items",
    )
    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="purchase_items",
    )

    quantity = models.PositiveIntegerField()
    purchase_price = models.DecimalField(max_digits=12, decimal_places=2)
    gst_percent = models.DecimalField(
        max_digits=5, decimal_places=2, default=Decimal("0.00")
    )
    gst_amount = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    line_total = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )

    class Meta:
        ordering = ["id"]

    def clean(self):
        if self.quantity is not None and self.quantity <= 0:
            raise ValidationError({"quantity": "quantity must be > 0"})
        if self.purchase_price is not None and self.purchase_price < Decimal("0.00"):
            raise ValidationError({"purchase_price": "purchase_price cannot be negative"})

    def __str__(self):
        return f"{self.product} x {self.quantity}"
