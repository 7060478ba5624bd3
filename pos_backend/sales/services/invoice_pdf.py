# sales/services/invoice_pdf.py

"""
INVOICE PDF RENDERING (reportlab)

A4, in memory:
- title "Tulsi POS Invoice"
- invoice number / customer / mobile
- Product | Qty | Rate | Total table (2dp amounts)
- invoice total
"""

from __future__ import annotations

import io
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm, mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

TITLE = "Tulsi POS Invoice"


def _amount(value) -> str:
    return f"{value or 0:.2f}"


def render_invoice_pdf(invoice, items) -> bytes:
    buffer = io.BytesIO()

    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=1.5 * cm,
        leftMargin=1.5 * cm,
        topMargin=1.5 * cm,
        bottomMargin=1.5 * cm,
        title=f"{TITLE} {invoice.invoice_number}",
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "InvoiceTitle",
        parent=styles["Heading1"],
        fontName="Helvetica-Bold",
        fontSize=16,
        spaceAfter=8,
    )
    normal_style = ParagraphStyle(
        "InvoiceNormal",
        parent=styles["Normal"],
        fontSize=11,
        spaceAfter=2,
    )
    total_style = ParagraphStyle(
        "InvoiceTotal",
        parent=styles["Normal"],
        fontName="Helvetica-Bold",
        fontSize=12,
    )

    story = [
        Paragraph(TITLE, title_style),
        Paragraph(f"Invoice: {escape(invoice.invoice_number or '')}", normal_style),
        Paragraph(f"Customer: {escape(invoice.customer_name or '')}", normal_style),
        Paragraph(f"Mobile: {escape(invoice.customer_mobile or '')}", normal_style),
        Spacer(1, 8 * mm),
    ]

    table_data = [["Product", "Qty", "Rate", "Total"]]
    for it in items:
        table_data.append(
            [
                getattr(it.product, "name", ""),
                str(it.quantity),
                _amount(it.sales_rate),
                _amount(it.line_total),
            ]
        )

    table = Table(table_data, colWidths=[80 * mm, 20 * mm, 30 * mm, 30 * mm])
    table.setStyle(
        TableStyle(
            [
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, 0), 11),
                ("FONTSIZE", (0, 1), (-1, -1), 10),
                ("LINEBELOW", (0, 0), (-1, 0), 0.75, colors.black),
                ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
            ]
        )
    )
    story.append(table)
    story.append(Spacer(1, 10 * mm))
    story.append(Paragraph(f"Total: {_amount(invoice.total_invoice_amount)}", total_style))

    doc.build(story)
    return buffer.getvalue()
