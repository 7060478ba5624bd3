from .inventory import record_purchase_receipt, record_sale_issue, stock_for_product

__all__ = [
    "record_purchase_receipt",
    "record_sale_issue",
    "stock_for_product",
]
