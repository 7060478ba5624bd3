# products/models/inventory_transaction.py

"""
CANONICAL INVENTORY LEDGER

Immutable inventory ledger entry.

GUARANTEES:
- Append-only (no updates, no deletes)
- Signed quantity: purchases add (+), sales remove (-)
- Every row points back at the document that produced it (ref_type + ref_id)
"""

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from .product import Product


class InventoryTransaction(models.Model):
    class RefType(models.TextChoices):
        PURCHASE = "purchase", "Purchase"
        SALE = "sale", "Sale"

    product = models.ForeignKey(
        Product, on_delete=models.PROTECT, related_name="inventory_transactions"
    )

    quantity = models.IntegerField()

    ref_type = models.CharField(max_length=20, choices=RefType.choices)
    ref_id = models.BigIntegerField()

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="inventory_transactions",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["product", "created_at"], name="products_in_product_idx"),
            models.Index(fields=["ref_type", "ref_id"], name="products_in_ref_idx"),
        ]

    def clean(self):
        if not self.quantity:
            raise ValidationError("quantity must be non-zero")

        if self.ref_type == self.RefType.PURCHASE and self.quantity < 0:
            raise ValidationError("purchase transactions must add stock")

        if self.ref_type == self.RefType.SALE and self.quantity > 0:
            raise ValidationError("sale transactions must remove stock")

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("InventoryTransaction records are immutable")

        self.full_clean()
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError(
            "InventoryTransaction records are immutable and cannot be deleted"
        )

    def __str__(self):
        product_name = getattr(self.product, "name", "Product")
        return f"{product_name} | {self.ref_type}#{self.ref_id} | {self.quantity:+d}"
