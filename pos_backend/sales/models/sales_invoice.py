# sales/models/sales_invoice.py

from decimal import Decimal

from django.conf import settings
from django.db import models

from backend.db import SoftDeleteModel

User = settings.AUTH_USER_MODEL


def _money_field(**kwargs):
    return models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00"), **kwargs
    )


class SalesInvoice(SoftDeleteModel):
    """
    Counter sales invoice.

    LIFECYCLE:
    - DRAFT     editable: header is overwritten, lines are replaced
    - INVOICED  terminal: never modified by create/update again

    GUARANTEES:
    - Totals are computed server-side (services.invoice_totals)
    - Stock leaves the ledger only when the invoice becomes INVOICED
    - invoice_pdf_key is filled after the PDF is uploaded (may stay NULL)
    """

    STATUS_DRAFT = "DRAFT"
    STATUS_INVOICED = "INVOICED"

    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_INVOICED, "Invoiced"),
    ]

    invoice_number = models.CharField(max_length=32, unique=True)

    customer_name = models.CharField(max_length=255, blank=True, default="")
    customer_mobile = models.CharField(max_length=32, blank=True, default="")

    status = models.CharField(
        max_length=16,
        choices=STATUS_CHOICES,
        default=STATUS_DRAFT,
    )

    total_amount_before_discount = _money_field()
    discount_type = models.CharField(max_length=16, blank=True, default="INR")
    discount_value = _money_field()
    total_discount = _money_field()
    taxable_amount = _money_field()
    total_gst = _money_field()
    round_off = _money_field()
    total_invoice_amount = _money_field()

    total_items = models.PositiveIntegerField(default=0)
    total_quantity = models.PositiveIntegerField(default=0)

    payment_mode = models.CharField(
        max_length=32,
        blank=True,
        default="",
        help_text="cash/card/upi",
    )

    invoice_pdf_key = models.CharField(max_length=512, null=True, blank=True)

    created_by = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sales_invoices",
        help_text="Cashier / staff who created the invoice",
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "created_at"], name="sales_inv_status_created_idx"),
        ]

    @property
    def is_locked(self) -> bool:
        return self.status == self.STATUS_INVOICED

    def __str__(self):
        return f"{self.invoice_number} ({self.status})"
