# sales/services/invoice_document.py

"""
INVOICE DOCUMENT PUBLISHING

render (reportlab) -> upload (S3) -> store key on the invoice.

Runs after the upsert transaction has committed. Callers decide what a
failure means; the API views only log it.
"""

from __future__ import annotations

import logging

from sales.models import SalesInvoice
from sales.services.exceptions import InvoiceNotFoundError
from sales.services.invoice_pdf import render_invoice_pdf
from sales.services.invoice_storage import invoice_pdf_key, upload_invoice_pdf

logger = logging.getLogger(__name__)


def publish_invoice_pdf(invoice_id: int) -> str:
    invoice = SalesInvoice.objects.alive().filter(id=invoice_id).first()
    if invoice is None:
        raise InvoiceNotFoundError("invoice not found")

    items = list(invoice.items.alive().select_related("product").order_by("id"))

    pdf_bytes = render_invoice_pdf(invoice, items)
    key = upload_invoice_pdf(key=invoice_pdf_key(invoice.invoice_number), body=pdf_bytes)

    SalesInvoice.objects.filter(id=invoice.id).update(invoice_pdf_key=key)
    return key


def publish_invoice_pdf_safely(invoice_id: int):
    """
    Best-effort wrapper used by the API: never raises, logs the outcome.
    Returns the key, or None on failure.
    """
    try:
        key = publish_invoice_pdf(invoice_id)
    except Exception:
        logger.exception(
            "Failed to generate/upload invoice pdf",
            extra={"invoice_id": invoice_id},
        )
        return None

    logger.info("Invoice pdf uploaded", extra={"invoice_id": invoice_id, "key": key})
    return key
