# products/models/product.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from backend.db import SoftDeleteModel


class Product(SoftDeleteModel):
    """
    Represents a sellable product.

    STOCK MODEL (IMPORTANT):
    - Product itself does NOT store stock
    - Stock lives in the InventoryTransaction ledger
    - Current stock = sum of signed ledger quantities
    """

    name = models.CharField(max_length=255, db_index=True)
    sku = models.CharField(max_length=128, blank=True, default="", db_index=True)
    barcode = models.CharField(max_length=128, blank=True, default="", db_index=True)
    hsn_code = models.CharField(max_length=32, blank=True, default="")
    gender = models.CharField(max_length=32, blank=True, default="")
    category = models.CharField(max_length=128, blank=True, default="")

    purchase_price = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )
    sales_price = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )
    gst_percent = models.DecimalField(
        max_digits=5, decimal_places=2, default=Decimal("0.00")
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["sku"], name="products_pr_sku_idx"),
            models.Index(fields=["name"], name="products_pr_name_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.sku})" if self.sku else self.name

    def clean(self):
        for field in ("purchase_price", "sales_price", "gst_percent"):
            value = getattr(self, field)
            if value is not None and Decimal(value) < 0:
                raise ValidationError(f"{field} cannot be negative")
