# products/tests/test_inventory.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase

from products.models import InventoryTransaction, Product
from products.services.inventory import (
    record_purchase_receipt,
    record_sale_issue,
    stock_for_product,
)


class InventoryLedgerTests(TestCase):
    """
    Inventory ledger tests.

    GUARANTEES:
    - Purchases add, sales remove
    - Stock is the signed sum of the ledger
    - Ledger rows are immutable
    """

    def setUp(self):
        self.product = Product.objects.create(
            name="Denim Jeans",
            sku="DNM-32",
            sales_price=Decimal("1499.00"),
        )

    def test_stock_is_signed_sum(self):
        record_purchase_receipt(product_id=self.product.id, quantity=10, purchase_id=1)
        record_purchase_receipt(product_id=self.product.id, quantity=5, purchase_id=2)
        record_sale_issue(product_id=self.product.id, quantity=3, invoice_id=7)

        self.assertEqual(stock_for_product(self.product.id), 12)

    def test_sale_rows_are_negative(self):
        tx = record_sale_issue(product_id=self.product.id, quantity=2, invoice_id=9)

        self.assertEqual(tx.quantity, -2)
        self.assertEqual(tx.ref_type, InventoryTransaction.RefType.SALE)
        self.assertEqual(tx.ref_id, 9)

    def test_quantity_must_be_positive_input(self):
        with self.assertRaises(ValidationError):
            record_purchase_receipt(product_id=self.product.id, quantity=0, purchase_id=1)

    def test_unknown_product_rejected(self):
        with self.assertRaises(ValidationError):
            record_purchase_receipt(product_id=987654, quantity=1, purchase_id=1)

    def test_ledger_rows_are_immutable(self):
        tx = record_purchase_receipt(product_id=self.product.id, quantity=4, purchase_id=3)

        tx.quantity = 40
        with self.assertRaises(ValidationError):
            tx.save()

        with self.assertRaises(ValidationError):
            tx.delete()

    def test_sign_must_match_ref_type(self):
        with self.assertRaises(ValidationError):
            InventoryTransaction.objects.create(
                product=self.product,
                quantity=-1,
                ref_type=InventoryTransaction.RefType.PURCHASE,
                ref_id=1,
            )
