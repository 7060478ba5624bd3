# purchases/tests/test_purchases.py

from decimal import Decimal
from unittest import mock

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from products.models import InventoryTransaction, Product
from products.services.inventory import stock_for_product
from purchases.models import PurchaseInvoice, Supplier
from purchases.services.recording_service import (
    PurchaseRecordingError,
    compute_purchase_line,
    record_purchase,
)

User = get_user_model()


class PurchaseLineMathTests(TestCase):
    def test_line_totals(self):
        line = compute_purchase_line(
            product_id=1,
            quantity=3,
            purchase_price=Decimal("100.00"),
            gst_percent=Decimal("12"),
        )
        self.assertEqual(line.base, Decimal("300.00"))
        self.assertEqual(line.gst_amount, Decimal("36.00"))
        self.assertEqual(line.line_total, Decimal("336.00"))

    def test_gst_rounds_half_up(self):
        line = compute_purchase_line(
            product_id=1,
            quantity=1,
            purchase_price=Decimal("10.10"),
            gst_percent=Decimal("5"),
        )
        # 10.10 * 5% = 0.505
        self.assertEqual(line.gst_amount, Decimal("0.51"))


class RecordPurchaseTests(TestCase):
    """
    GUARANTEES:
    - Header totals are the sums of the lines
    - One +quantity ledger row per line
    - Any failure leaves nothing behind
    """

    def setUp(self):
        self.user = User.objects.create_user(email="admin@example.com", password="pass", role="admin")
        self.supplier = Supplier.objects.create(name="Surat Textiles")
        self.kurta = Product.objects.create(name="Kurta", sku="K-1")
        self.saree = Product.objects.create(name="Saree", sku="S-1")

    def test_records_header_lines_and_stock(self):
        invoice = record_purchase(
            supplier_id=self.supplier.id,
            invoice_number="SUP-001",
            notes="first lot",
            items=[
                {"product_id": self.kurta.id, "quantity": 10, "purchase_price": Decimal("200.00"), "gst_percent": Decimal("5")},
                {"product_id": self.saree.id, "quantity": 2, "purchase_price": Decimal("1000.00"), "gst_percent": Decimal("12")},
            ],
            user=self.user,
        )

        self.assertEqual(invoice.total_amount_before_discount, Decimal("4000.00"))
        self.assertEqual(invoice.total_gst, Decimal("340.00"))
        self.assertEqual(invoice.total_invoice_amount, Decimal("4340.00"))
        self.assertEqual(invoice.discount_amount, Decimal("0.00"))
        self.assertEqual(invoice.total_items, 2)
        self.assertEqual(invoice.total_quantity, 12)
        self.assertEqual(invoice.items.count(), 2)
        self.assertEqual(invoice.created_by, self.user)

        self.assertEqual(stock_for_product(self.kurta.id), 10)
        self.assertEqual(stock_for_product(self.saree.id), 2)
        self.assertEqual(
            InventoryTransaction.objects.filter(ref_type="purchase", ref_id=invoice.id).count(),
            2,
        )

    def test_no_items_rejected(self):
        with self.assertRaisesMessage(PurchaseRecordingError, "at least one item is required"):
            record_purchase(supplier_id=self.supplier.id, items=[])

    def test_unknown_product_rolls_back(self):
        with self.assertRaises(PurchaseRecordingError):
            record_purchase(
                supplier_id=self.supplier.id,
                items=[
                    {"product_id": self.kurta.id, "quantity": 1, "purchase_price": Decimal("1.00")},
                    {"product_id": 999999, "quantity": 1, "purchase_price": Decimal("1.00")},
                ],
            )

        self.assertEqual(PurchaseInvoice.objects.count(), 0)
        self.assertEqual(InventoryTransaction.objects.count(), 0)

    def test_ledger_failure_rolls_back_everything(self):
        with mock.patch(
            "purchases.services.recording_service.record_purchase_receipt",
            side_effect=RuntimeError("ledger down"),
        ):
            with self.assertRaises(RuntimeError):
                record_purchase(
                    supplier_id=self.supplier.id,
                    items=[{"product_id": self.kurta.id, "quantity": 1, "purchase_price": Decimal("1.00")}],
                )

        self.assertEqual(PurchaseInvoice.objects.count(), 0)

    def test_deleted_supplier_rejected(self):
        self.supplier.soft_delete()
        with self.assertRaisesMessage(PurchaseRecordingError, "supplier not found"):
            record_purchase(
                supplier_id=self.supplier.id,
                items=[{"product_id": self.kurta.id, "quantity": 1, "purchase_price": Decimal("1.00")}],
            )


class PurchaseApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="cashier@example.com", password="pass", role="cashier")
        self.client.force_authenticate(user=self.user)
        self.supplier = Supplier.objects.create(name="Surat Textiles")
        self.product = Product.objects.create(name="Kurta", sku="K-1")

    def test_record_purchase(self):
        response = self.client.post(
            "/api/purchases/",
            {
                "supplier_id": self.supplier.id,
                "invoice_number": "SUP-9",
                "items": [
                    {"product_id": self.product.id, "quantity": 4, "purchase_price": "250.00", "gst_percent": "5"},
                ],
            },
            format="json",
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["message"], "Purchase recorded")
        data = response.data["data"]
        self.assertEqual(data["total_amount"], Decimal("1050.00"))
        self.assertEqual(data["total_quantity"], 4)

        invoice = PurchaseInvoice.objects.get(id=data["purchase_id"])
        self.assertEqual(invoice.created_by, self.user)

    def test_record_purchase_without_items(self):
        response = self.client.post(
            "/api/purchases/",
            {"supplier_id": self.supplier.id, "items": []},
            format="json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["message"], "at least one item is required")

    def test_list_purchases(self):
        record_purchase(
            supplier_id=self.supplier.id,
            invoice_number="SUP-1",
            items=[{"product_id": self.product.id, "quantity": 1, "purchase_price": Decimal("1.00")}],
        )

        response = self.client.get("/api/purchases/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["message"], "Purchases fetched successfully")
        row = response.data["data"][0]
        self.assertEqual(row["invoice_number"], "SUP-1")
        self.assertEqual(row["supplier_name"], "Surat Textiles")
        self.assertRegex(row["created_at"], r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")
