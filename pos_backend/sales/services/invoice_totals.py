# sales/services/invoice_totals.py

"""
SALES INVOICE TOTALS

Pure arithmetic: no database, no side effects.

Per line:
    gross     = quantity * sales_rate
    discount  = gross * value / 100   for exactly %, PCT, PERCENT (case-sensitive)
              = value                 for anything else (INR, FLAT, blank, unknown)
              clamped at 0
    taxable   = gross - discount, clamped at 0
    gst       = taxable * gst_percent / 100
    line_total = taxable + gst

Every computed line amount is rounded to 2dp (half-up) before summing.

Header:
    sums of the line amounts, then
    total_invoice_amount = sum(line_total) rounded to a whole unit (half away from zero)
    round_off            = total_invoice_amount - sum(line_total)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Mapping

TWOPLACES = Decimal("0.01")
WHOLE = Decimal("1")
HUNDRED = Decimal("100")
ZERO = Decimal("0.00")

PERCENT_DISCOUNT_TYPES = {"%", "PCT", "PERCENT"}
DEFAULT_DISCOUNT_TYPE = "INR"


def _dec(value) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    return Decimal(str(value))


def _money(value) -> Decimal:
    return _dec(value).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def is_percent_discount(discount_type) -> bool:
    return discount_type in PERCENT_DISCOUNT_TYPES


@dataclass(frozen=True)
class LineTotals:
    quantity: int
    gross: Decimal
    discount_amount: Decimal
    taxable: Decimal
    gst_amount: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class InvoiceTotals:
    lines: tuple
    total_amount_before_discount: Decimal
    total_discount: Decimal
    taxable_amount: Decimal
    total_gst: Decimal
    unrounded_total: Decimal
    total_invoice_amount: Decimal
    round_off: Decimal
    total_items: int
    total_quantity: int
    discount_type: str
    discount_value: Decimal


def compute_line(
    *,
    quantity,
    sales_rate,
    discount_type="",
    discount_value=0,
    gst_percent=0,
) -> LineTotals:
    qty = int(quantity)
    gross = _money(Decimal(qty) * _dec(sales_rate))

    if is_percent_discount(discount_type):
        discount = _money(gross * _dec(discount_value) / HUNDRED)
    else:
        discount = _money(discount_value)
    if discount < ZERO:
        discount = ZERO

    taxable = gross - discount
    if taxable < ZERO:
        taxable = ZERO

    gst = _money(taxable * _dec(gst_percent) / HUNDRED)

    return LineTotals(
        quantity=qty,
        gross=gross,
        discount_amount=discount,
        taxable=taxable,
        gst_amount=gst,
        line_total=taxable + gst,
    )


def header_discount(items: list) -> tuple[str, Decimal]:
    """
    Header discount_type / discount_value mirror the first line.
    A blank first-line type reads as INR.
    """
    if not items:
        return DEFAULT_DISCOUNT_TYPE, ZERO

    first = items[0]
    discount_type = first.get("discount_type") or DEFAULT_DISCOUNT_TYPE
    return discount_type, _money(first.get("discount_value"))


def compute_invoice_totals(items: Iterable[Mapping]) -> InvoiceTotals:
    items = list(items)

    lines = tuple(
        compute_line(
            quantity=it["quantity"],
            sales_rate=it["sales_rate"],
            discount_type=it.get("discount_type", ""),
            discount_value=it.get("discount_value", 0),
            gst_percent=it.get("gst_percent", 0),
        )
        for it in items
    )

    unrounded = sum((ln.line_total for ln in lines), ZERO)
    rounded = unrounded.quantize(WHOLE, rounding=ROUND_HALF_UP)
    discount_type, discount_value = header_discount(items)

    return InvoiceTotals(
        lines=lines,
        total_amount_before_discount=sum((ln.gross for ln in lines), ZERO),
        total_discount=sum((ln.discount_amount for ln in lines), ZERO),
        taxable_amount=sum((ln.taxable for ln in lines), ZERO),
        total_gst=sum((ln.gst_amount for ln in lines), ZERO),
        unrounded_total=unrounded,
        total_invoice_amount=_money(rounded),
        round_off=_money(rounded - unrounded),
        total_items=len(lines),
        total_quantity=sum(ln.quantity for ln in lines),
        discount_type=discount_type,
        discount_value=discount_value,
    )
