# sales/tests/test_invoice_document.py

from datetime import date
from decimal import Decimal
from unittest import mock

from django.test import TestCase, override_settings
from django.utils import timezone

from products.models import Product
from sales.models import SalesInvoice
from sales.services import invoice_storage
from sales.services.exceptions import InvoiceNotFoundError, InvoiceStorageError
from sales.services.invoice_document import publish_invoice_pdf, publish_invoice_pdf_safely
from sales.services.invoice_pdf import render_invoice_pdf
from sales.services.invoice_service import upsert_invoice


class InvoiceDocumentTestBase(TestCase):
    def setUp(self):
        invoice_storage._client_for.cache_clear()
        self.addCleanup(invoice_storage._client_for.cache_clear)

        self.product = Product.objects.create(name="Cotton Kurta", sku="KRT-001")
        result = upsert_invoice(
            customer_name="Asha",
            customer_mobile="9800000000",
            is_confirmed=True,
            items=[{"product_id": self.product.id, "quantity": 2, "sales_rate": Decimal("499.75")}],
        )
        self.invoice = SalesInvoice.objects.get(id=result.invoice_id)


class RenderInvoicePdfTests(InvoiceDocumentTestBase):
    def test_renders_pdf_bytes(self):
        items = list(self.invoice.items.alive().select_related("product"))

        pdf = render_invoice_pdf(self.invoice, items)

        self.assertIsInstance(pdf, bytes)
        self.assertTrue(pdf.startswith(b"%PDF"))

    def test_markup_like_text_is_printed_literally(self):
        self.invoice.customer_name = "Ravi <b>Kumar"
        self.invoice.customer_mobile = "x<br"
        self.product.name = "Kurta <i>"
        self.product.save()
        items = list(self.invoice.items.alive().select_related("product"))

        pdf = render_invoice_pdf(self.invoice, items)

        self.assertTrue(pdf.startswith(b"%PDF"))


class InvoiceStorageTests(InvoiceDocumentTestBase):
    def test_key_layout(self):
        self.assertEqual(
            invoice_storage.invoice_pdf_key("INV202601050001", date(2026, 1, 5)),
            "invoices/2026-01-05/INV202601050001.pdf",
        )

    @override_settings(AWS_REGION="", S3_BUCKET_INVOICES="invoices-bucket")
    def test_upload_fails_without_region(self):
        with self.assertRaises(InvoiceStorageError):
            invoice_storage.upload_invoice_pdf(key="invoices/x.pdf", body=b"%PDF")

    @override_settings(AWS_REGION="ap-south-1", S3_BUCKET_INVOICES="")
    def test_upload_fails_without_bucket(self):
        with self.assertRaises(InvoiceStorageError):
            invoice_storage.upload_invoice_pdf(key="invoices/x.pdf", body=b"%PDF")

    @override_settings(AWS_REGION="ap-south-1", S3_BUCKET_INVOICES="invoices-bucket")
    def test_upload_puts_pdf_object(self):
        with mock.patch("sales.services.invoice_storage.boto3.client") as client_factory:
            key = invoice_storage.upload_invoice_pdf(key="invoices/x.pdf", body=b"%PDF-1.4")

        self.assertEqual(key, "invoices/x.pdf")
        client_factory.assert_called_once_with("s3", region_name="ap-south-1")
        client_factory.return_value.put_object.assert_called_once_with(
            Bucket="invoices-bucket",
            Key="invoices/x.pdf",
            Body=b"%PDF-1.4",
            ContentType="application/pdf",
        )


@override_settings(AWS_REGION="ap-south-1", S3_BUCKET_INVOICES="invoices-bucket")
class PublishInvoicePdfTests(InvoiceDocumentTestBase):
    def test_publish_uploads_and_stores_key(self):
        with mock.patch("sales.services.invoice_storage.boto3.client") as client_factory:
            key = publish_invoice_pdf(self.invoice.id)

        expected = f"invoices/{timezone.localdate():%Y-%m-%d}/{self.invoice.invoice_number}.pdf"
        self.assertEqual(key, expected)

        kwargs = client_factory.return_value.put_object.call_args.kwargs
        self.assertEqual(kwargs["Key"], expected)
        self.assertTrue(kwargs["Body"].startswith(b"%PDF"))

        self.invoice.refresh_from_db()
        self.assertEqual(self.invoice.invoice_pdf_key, expected)

    def test_publish_missing_invoice(self):
        self.invoice.soft_delete()
        with self.assertRaises(InvoiceNotFoundError):
            publish_invoice_pdf(self.invoice.id)

    def test_safe_publish_logs_and_returns_none(self):
        with mock.patch("sales.services.invoice_storage.boto3.client") as client_factory:
            client_factory.return_value.put_object.side_effect = RuntimeError("s3 down")
            with self.assertLogs("sales.services.invoice_document", level="ERROR"):
                key = publish_invoice_pdf_safely(self.invoice.id)

        self.assertIsNone(key)
        self.invoice.refresh_from_db()
        self.assertIsNone(self.invoice.invoice_pdf_key)
