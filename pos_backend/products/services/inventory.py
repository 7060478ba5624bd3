"""
======================================================
PATH: products/services/inventory.py
======================================================
INVENTORY CORE SERVICES

Purpose:
- Stock-in rows for recorded purchases (+quantity).
- Stock-out rows for finalized sales invoices (-quantity).
- Ledger-derived stock lookup.

Rules:
- Quantities are integer units; callers pass them positive, the sign is
  decided here from the movement kind.
- Callers own the transaction: these helpers are meant to run inside the
  purchase / invoice atomic block so a failure rolls the document back too.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db.models import Sum
from django.db.models.functions import Coalesce

from products.models import InventoryTransaction


def _to_positive_int(value, *, field_name="quantity") -> int:
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a positive integer")
    try:
        qty = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a positive integer")
    if qty <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return qty


def record_purchase_receipt(*, product_id, quantity, purchase_id, user=None) -> InventoryTransaction:
    return InventoryTransaction.objects.create(
        product_id=product_id,
        quantity=_to_positive_int(quantity),
        ref_type=InventoryTransaction.RefType.PURCHASE,
        ref_id=purchase_id,
        created_by=user,
    )


def record_sale_issue(*, product_id, quantity, invoice_id, user=None) -> InventoryTransaction:
    return InventoryTransaction.objects.create(
        product_id=product_id,
        quantity=-_to_positive_int(quantity),
        ref_type=InventoryTransaction.RefType.SALE,
        ref_id=invoice_id,
        created_by=user,
    )


def stock_for_product(product_id) -> int:
    return int(
        InventoryTransaction.objects.filter(product_id=product_id).aggregate(
            total=Coalesce(Sum("quantity"), 0)
        )["total"]
    )
