# sales/serializers/__init__.py

from .invoice import (
    SalesInvoiceHeaderSerializer,
    SalesInvoiceItemInputSerializer,
    SalesInvoiceItemSerializer,
    SalesInvoiceListSerializer,
    SalesInvoiceUpsertSerializer,
)

__all__ = [
    "SalesInvoiceHeaderSerializer",
    "SalesInvoiceItemInputSerializer",
    "SalesInvoiceItemSerializer",
    "SalesInvoiceListSerializer",
    "SalesInvoiceUpsertSerializer",
]
