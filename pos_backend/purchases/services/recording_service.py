# purchases/services/recording_service.py

"""
======================================================
PATH: purchases/services/recording_service.py
======================================================
PURCHASE RECORDING SERVICE

Record a supplier purchase atomically:

1) Validate supplier + lines
2) Compute line and header totals
3) Write header + lines
4) Write one stock-in ledger row per line (ref_type=purchase)

Any failure rolls the whole purchase back.

Money rules:
- base      = quantity * purchase_price
- gst       = base * gst_percent / 100
- line_total = base + gst
- each line amount is rounded to 2dp (half-up) before it is summed
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from django.core.exceptions import ValidationError
from django.db import transaction

from products.models import Product
from products.services.inventory import record_purchase_receipt
from purchases.models import PurchaseInvoice, PurchaseInvoiceItem, Supplier

logger = logging.getLogger(__name__)


class PurchaseRecordingError(ValueError):
    pass


TWOPLACES = Decimal("0.01")
HUNDRED = Decimal("100")


def _money(v) -> Decimal:
    return Decimal(str(v or "0.00")).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class PurchaseLine:
    product_id: int
    quantity: int
    purchase_price: Decimal
    gst_percent: Decimal
    base: Decimal
    gst_amount: Decimal
    line_total: Decimal


def compute_purchase_line(*, product_id, quantity, purchase_price, gst_percent) -> PurchaseLine:
    qty = int(quantity)
    price = Decimal(str(purchase_price or "0"))
    pct = Decimal(str(gst_percent or "0"))

    base = _money(Decimal(qty) * price)
    gst = _money(base * pct / HUNDRED)

    return PurchaseLine(
        product_id=int(product_id),
        quantity=qty,
        purchase_price=price,
        gst_percent=pct,
        base=base,
        gst_amount=gst,
        line_total=base + gst,
    )


@transaction.atomic
def record_purchase(*, supplier_id, invoice_number="", notes="", items, user=None) -> PurchaseInvoice:
    """
    RECORD PURCHASE (atomic)

    Returns the saved PurchaseInvoice (totals populated).
    """
    if not items:
        raise PurchaseRecordingError("at least one item is required")

    supplier = Supplier.objects.alive().filter(id=supplier_id).first()
    if supplier is None:
        raise PurchaseRecordingError("supplier not found")

    lines = [
        compute_purchase_line(
            product_id=it["product_id"],
            quantity=it["quantity"],
            purchase_price=it["purchase_price"],
            gst_percent=it.get("gst_percent"),
        )
        for it in items
    ]

    product_ids = {ln.product_id for ln in lines}
    found = set(
        Product.objects.alive().filter(id__in=product_ids).values_list("id", flat=True)
    )
    missing = sorted(product_ids - found)
    if missing:
        raise PurchaseRecordingError(f"product not found: {missing[0]}")

    invoice = PurchaseInvoice.objects.create(
        invoice_number=(invoice_number or "").strip(),
        supplier=supplier,
        total_amount_before_discount=sum((ln.base for ln in lines), Decimal("0.00")),
        discount_amount=Decimal("0.00"),
        total_gst=sum((ln.gst_amount for ln in lines), Decimal("0.00")),
        total_invoice_amount=sum((ln.line_total for ln in lines), Decimal("0.00")),
        total_items=len(lines),
        total_quantity=sum(ln.quantity for ln in lines),
        notes=notes or "",
        created_by=user,
    )

    for ln in lines:
        PurchaseInvoiceItem.objects.create(
            purchase_invoice=invoice,
            product_id=ln.product_id,
            quantity=ln.quantity,
            purchase_price=ln.purchase_price,
            gst_percent=ln.gst_percent,
            gst_amount=ln.gst_amount,
            line_total=ln.line_total,
        )

        try:
            record_purchase_receipt(
                product_id=ln.product_id,
                quantity=ln.quantity,
                purchase_id=invoice.id,
                user=user,
            )
        except ValidationError as exc:
            raise PurchaseRecordingError(f"Failed to record stock: {exc}") from exc

    logger.info(
        "Purchase recorded",
        extra={
            "purchase_id": invoice.id,
            "supplier_id": supplier.id,
            "total_amount": str(invoice.total_invoice_amount),
            "total_quantity": invoice.total_quantity,
        },
    )

    return invoice
