from __future__ import annotations

from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


def money(max_digits=14):
    return models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=max_digits)


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("products", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="SalesInvoice",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "deleted_at",
                    models.DateTimeField(blank=True, db_index=True, null=True),
                ),
                ("invoice_number", models.CharField(max_length=32, unique=True)),
                ("customer_name", models.CharField(blank=True, default="", max_length=255)),
                ("customer_mobile", models.CharField(blank=True, default="", max_length=32)),
                (
                    "status",
                    models.CharField(
                        choices=[("DRAFT", "Draft"), ("INVOICED", "Invoiced")],
                        default="DRAFT",
                        max_length=16,
                    ),
                ),
                ("total_amount_before_discount", money()),
                ("discount_type", models.CharField(blank=True, default="INR", max_length=16)),
                ("discount_value", money()),
                ("total_discount", money()),
                ("taxable_amount", money()),
                ("total_gst", money()),
                ("round_off", money()),
                ("total_invoice_amount", money()),
                ("total_items", models.PositiveIntegerField(default=0)),
                ("total_quantity", models.PositiveIntegerField(default=0)),
                (
                    "payment_mode",
                    models.CharField(blank=True, default="", help_text="cash/card/upi", max_length=32),
                ),
                ("invoice_pdf_key", models.CharField(blank=True, max_length=512, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        help_text="Cashier / staff who created the invoice",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="sales_invoices",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["status", "created_at"], name="sales_inv_status_created_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="SalesInvoiceItem",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "deleted_at",
                    models.DateTimeField(blank=True, db_index=True, null=True),
                ),
                ("quantity", models.PositiveIntegerField()),
                ("mrp", money(12)),
                ("sales_rate", models.DecimalField(decimal_places=2, max_digits=12)),
                ("discount_type", models.CharField(blank=True, default="", max_length=16)),
                ("discount_value", money(12)),
                ("discount_amount", money()),
                ("gst_percent", money(5)),
                ("gst_amount", money()),
                ("line_total", money()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="sales_invoice_items",
                        to="products.product",
                    ),
                ),
                (
                    "sales_invoice",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="sales.salesinvoice",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
                "indexes": [
                    models.Index(
                        fields=["sales_invoice", "deleted_at"],
                        name="sales_item_invoice_live_idx",
                    ),
                ],
            },
        ),
    ]
