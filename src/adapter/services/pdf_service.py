"""ReportLab PDF Generation Service Implementation

Renders order invoices using the ReportLab platypus layout engine.
"""

from datetime import datetime, timezone
from decimal import Decimal
from io import BytesIO

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.pricing import OrderInvoice

HEADER_COLOR = colors.HexColor("#2C3E50")
MUTED_COLOR = colors.HexColor("#7F8C8D")
COLUMN_WIDTHS = [75 * mm, 20 * mm, 25 * mm, 50 * mm]


def _money(currency: str, amount: Decimal) -> str:
    return f"{currency} {amount:,.2f}"


def _percent(value: Decimal) -> str:
    if not value:
        return "-"
    return f"{value.normalize():f}%"


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService
    """

    def generate_order_invoice(
        self,
        order_id: int,
        invoice: OrderInvoice,
        currency: str = "USD",
        company_name: str = "Order Management Service",
        company_address: str = "",
    ) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=f"Invoice for order {order_id}",
        )

        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            spaceAfter=10,
            textColor=HEADER_COLOR,
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=MUTED_COLOR,
        )
        subtitle_style = ParagraphStyle(
            "SubtitleStyle",
            parent=styles["Heading2"],
            fontSize=14,
            spaceAfter=12,
        )

        elements = [Paragraph(company_name, title_style)]
        if company_address:
            elements.append(Paragraph(company_address, header_style))
        elements.append(Spacer(1, 8 * mm))
        elements.append(Paragraph(f"INVOICE - ORDER #{order_id}", subtitle_style))
        elements.append(
            Paragraph(
                f"Generated: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S UTC')}",
                header_style,
            )
        )
        elements.append(Spacer(1, 8 * mm))

        line_data = [["Product", "Quantity", "Discount", "Amount"]]
        for line in invoice.lines:
            line_data.append(
                [
                    Paragraph(line.product_name, styles["Normal"]),
                    str(line.quantity),
                    _percent(line.discount_percent),
                    _money(currency, line.amount),
                ]
            )

        line_table = Table(line_data, colWidths=COLUMN_WIDTHS, repeatRows=1)
        line_table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        total_table = Table(
            [["", "", "Total:", _money(currency, invoice.total_amount)]],
            colWidths=COLUMN_WIDTHS,
        )
        total_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (2, 0), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 11),
                    ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
                    ("LINEABOVE", (2, 0), (-1, 0), 1.5, HEADER_COLOR),
                    ("TOPPADDING", (0, 0), (-1, -1), 8),
                ]
            )
        )
        elements.append(total_table)

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
