# sales/services/exceptions.py

"""
SALES DOMAIN ERRORS

Views translate these into envelope responses:
- InvoiceNotFoundError -> 404 "invoice not found"
- InvoiceLockedError   -> 400 "invoice already invoiced, cannot update"
- InvoiceStorageError  -> never reaches a client (PDF publishing is best-effort)
"""


class SalesInvoiceError(Exception):
    pass


class InvoiceNotFoundError(SalesInvoiceError):
    pass


class InvoiceLockedError(SalesInvoiceError):
    pass


class InvoiceNumberError(SalesInvoiceError):
    pass


class InvoiceStorageError(SalesInvoiceError):
    pass
