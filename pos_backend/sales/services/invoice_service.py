# sales/services/invoice_service.py

"""
======================================================
PATH: sales/services/invoice_service.py
======================================================
SALES INVOICE UPSERT (CORE DOMAIN SERVICE)

One entry point for create and update:

    upsert_invoice(invoice_id=None, ...)  -> create
    upsert_invoice(invoice_id=<id>, ...)  -> update

Rules:
- Create: new invoice number (INV + YYYYMMDD + 4 digits),
  status INVOICED when confirmed, otherwise DRAFT.
- Update: only live DRAFT invoices. Header is overwritten, the live lines are
  soft-deleted and the new lines inserted.
- INVOICED is terminal: any update attempt raises InvoiceLockedError.
- Reaching INVOICED writes one -quantity ledger row per line (ref_type=sale).
- Everything happens in ONE transaction.

PDF publishing is NOT done here; callers trigger it after commit.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from django.db import transaction
from django.utils import timezone

from products.services.inventory import record_sale_issue
from sales.models import SalesInvoice, SalesInvoiceItem
from sales.services.exceptions import (
    InvoiceLockedError,
    InvoiceNotFoundError,
    InvoiceNumberError,
)
from sales.services.invoice_totals import compute_invoice_totals

logger = logging.getLogger(__name__)

INVOICE_NUMBER_ATTEMPTS = 20


@dataclass(frozen=True)
class UpsertResult:
    invoice_id: int
    final_status: str


# ============================================================
# INPUT HELPERS
# ============================================================


def parse_boolish(value) -> bool:
    """
    Lenient confirmation flag:
    - bool as-is
    - numbers: non-zero is true
    - strings: "true" / "1" (trimmed, case-insensitive)
    - anything else (None included) is false
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1")
    return False


def generate_invoice_number(now=None) -> str:
    now = now or timezone.localtime()
    return f"INV{now:%Y%m%d}{time.time_ns() % 10000:04d}"


def _next_invoice_number() -> str:
    for _ in range(INVOICE_NUMBER_ATTEMPTS):
        number = generate_invoice_number()
        if not SalesInvoice.objects.filter(invoice_number=number).exists():
            return number
    raise InvoiceNumberError("could not allocate a unique invoice number")


# ============================================================
# UPSERT
# ============================================================


@transaction.atomic
def upsert_invoice(
    *,
    invoice_id: Optional[int] = None,
    customer_name: str = "",
    customer_mobile: str = "",
    payment_mode: str = "",
    is_confirmed=False,
    items: list,
    user=None,
) -> UpsertResult:
    invoice = None
    if invoice_id is not None:
        invoice = (
            SalesInvoice.objects.alive()
            .select_for_update()
            .filter(id=invoice_id)
            .first()
        )
        if invoice is None:
            raise InvoiceNotFoundError("invoice not found")
        if invoice.is_locked:
            raise InvoiceLockedError("invoice already invoiced, cannot update")

    totals = compute_invoice_totals(items)

    final_status = (
        SalesInvoice.STATUS_INVOICED
        if parse_boolish(is_confirmed)
        else SalesInvoice.STATUS_DRAFT
    )

    header = {
        "customer_name": customer_name or "",
        "customer_mobile": customer_mobile or "",
        "payment_mode": payment_mode or "",
        "status": final_status,
        "total_amount_before_discount": totals.total_amount_before_discount,
        "discount_type": totals.discount_type,
        "discount_value": totals.discount_value,
        "total_discount": totals.total_discount,
        "taxable_amount": totals.taxable_amount,
        "total_gst": totals.total_gst,
        "round_off": totals.round_off,
        "total_invoice_amount": totals.total_invoice_amount,
        "total_items": totals.total_items,
        "total_quantity": totals.total_quantity,
    }

    if invoice is None:
        invoice = SalesInvoice.objects.create(
            invoice_number=_next_invoice_number(),
            created_by=user,
            **header,
        )
    else:
        for field, value in header.items():
            setattr(invoice, field, value)
        invoice.save(update_fields=[*header.keys(), "updated_at"])

        invoice.items.soft_delete()

    SalesInvoiceItem.objects.bulk_create(
        [
            SalesInvoiceItem(
                sales_invoice=invoice,
                product_id=it["product_id"],
                quantity=line.quantity,
                mrp=it.get("mrp") or 0,
                sales_rate=it["sales_rate"],
                discount_type=it.get("discount_type") or "",
                discount_value=it.get("discount_value") or 0,
                discount_amount=line.discount_amount,
                gst_percent=it.get("gst_percent") or 0,
                gst_amount=line.gst_amount,
                line_total=line.line_total,
            )
            for it, line in zip(items, totals.lines)
        ]
    )

    if final_status == SalesInvoice.STATUS_INVOICED:
        for it, line in zip(items, totals.lines):
            record_sale_issue(
                product_id=it["product_id"],
                quantity=line.quantity,
                invoice_id=invoice.id,
                user=user,
            )

    logger.info(
        "Sales invoice saved",
        extra={
            "invoice_id": invoice.id,
            "invoice_number": invoice.invoice_number,
            "final_status": final_status,
            "total_invoice_amount": str(totals.total_invoice_amount),
            "mode": "update" if invoice_id is not None else "create",
        },
    )

    return UpsertResult(invoice_id=invoice.id, final_status=final_status)
