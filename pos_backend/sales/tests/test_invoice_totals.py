# sales/tests/test_invoice_totals.py

from decimal import Decimal

from django.test import SimpleTestCase

from sales.services.invoice_totals import (
    compute_invoice_totals,
    compute_line,
    is_percent_discount,
)


class LineTotalsTests(SimpleTestCase):
    def test_percent_discount_then_gst(self):
        line = compute_line(
            quantity=2,
            sales_rate=Decimal("499.50"),
            discount_type="%",
            discount_value=Decimal("10"),
            gst_percent=Decimal("5"),
        )
        self.assertEqual(line.gross, Decimal("999.00"))
        self.assertEqual(line.discount_amount, Decimal("99.90"))
        self.assertEqual(line.taxable, Decimal("899.10"))
        # 899.10 * 5% = 44.955
        self.assertEqual(line.gst_amount, Decimal("44.96"))
        self.assertEqual(line.line_total, Decimal("944.06"))

    def test_flat_discount_for_inr_and_unknown_types(self):
        for discount_type in ("INR", "FLAT", "", "coupon"):
            line = compute_line(
                quantity=1,
                sales_rate=Decimal("250.00"),
                discount_type=discount_type,
                discount_value=Decimal("20"),
                gst_percent=Decimal("12"),
            )
            self.assertEqual(line.discount_amount, Decimal("20.00"), discount_type)
            self.assertEqual(line.gst_amount, Decimal("27.60"), discount_type)
            self.assertEqual(line.line_total, Decimal("257.60"), discount_type)

    def test_negative_discount_is_ignored(self):
        line = compute_line(
            quantity=1,
            sales_rate=Decimal("100.00"),
            discount_type="INR",
            discount_value=Decimal("-5"),
        )
        self.assertEqual(line.discount_amount, Decimal("0.00"))
        self.assertEqual(line.line_total, Decimal("100.00"))

    def test_discount_larger_than_gross_clamps_taxable(self):
        line = compute_line(
            quantity=1,
            sales_rate=Decimal("50.00"),
            discount_type="INR",
            discount_value=Decimal("80"),
            gst_percent=Decimal("18"),
        )
        self.assertEqual(line.taxable, Decimal("0"))
        self.assertEqual(line.gst_amount, Decimal("0.00"))
        self.assertEqual(line.line_total, Decimal("0"))

    def test_percent_type_names(self):
        self.assertTrue(is_percent_discount("%"))
        self.assertTrue(is_percent_discount("PCT"))
        self.assertTrue(is_percent_discount("PERCENT"))
        for other in ("pct", " percent ", "Percent", "PCT ", "INR", "", None):
            self.assertFalse(is_percent_discount(other), other)

    def test_lowercase_pct_is_a_flat_discount(self):
        line = compute_line(
            quantity=1,
            sales_rate=Decimal("1000"),
            discount_type="pct",
            discount_value=Decimal("10"),
        )
        self.assertEqual(line.discount_amount, Decimal("10.00"))
        self.assertEqual(line.line_total, Decimal("990.00"))


class InvoiceTotalsTests(SimpleTestCase):
    def _items(self):
        return [
            {
                "product_id": 1,
                "quantity": 2,
                "sales_rate": Decimal("499.50"),
                "discount_type": "%",
                "discount_value": Decimal("10"),
                "gst_percent": Decimal("5"),
            },
            {
                "product_id": 2,
                "quantity": 1,
                "sales_rate": Decimal("250.00"),
                "discount_type": "INR",
                "discount_value": Decimal("20"),
                "gst_percent": Decimal("12"),
            },
        ]

    def test_header_sums_and_round_off(self):
        totals = compute_invoice_totals(self._items())

        self.assertEqual(totals.total_amount_before_discount, Decimal("1249.00"))
        self.assertEqual(totals.total_discount, Decimal("119.90"))
        self.assertEqual(totals.taxable_amount, Decimal("1129.10"))
        self.assertEqual(totals.total_gst, Decimal("72.56"))
        self.assertEqual(totals.unrounded_total, Decimal("1201.66"))
        self.assertEqual(totals.total_invoice_amount, Decimal("1202.00"))
        self.assertEqual(totals.round_off, Decimal("0.34"))
        self.assertEqual(totals.total_items, 2)
        self.assertEqual(totals.total_quantity, 3)

    def test_header_discount_mirrors_first_line(self):
        totals = compute_invoice_totals(self._items())
        self.assertEqual(totals.discount_type, "%")
        self.assertEqual(totals.discount_value, Decimal("10.00"))

    def test_blank_first_discount_type_reads_as_inr(self):
        items = self._items()
        items[0]["discount_type"] = ""
        totals = compute_invoice_totals(items)
        self.assertEqual(totals.discount_type, "INR")

    def test_half_rounds_up(self):
        totals = compute_invoice_totals(
            [{"product_id": 1, "quantity": 1, "sales_rate": Decimal("10.50")}]
        )
        self.assertEqual(totals.total_invoice_amount, Decimal("11.00"))
        self.assertEqual(totals.round_off, Decimal("0.50"))

    def test_round_off_can_be_negative(self):
        totals = compute_invoice_totals(
            [{"product_id": 1, "quantity": 1, "sales_rate": Decimal("10.49")}]
        )
        self.assertEqual(totals.total_invoice_amount, Decimal("10.00"))
        self.assertEqual(totals.round_off, Decimal("-0.49"))
