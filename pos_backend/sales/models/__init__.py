# sales/models/__init__.py

from .sales_invoice import SalesInvoice
from .sales_invoice_item import SalesInvoiceItem

__all__ = [
    "SalesInvoice",
    "SalesInvoiceItem",
]
