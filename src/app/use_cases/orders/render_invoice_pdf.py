"""RenderInvoicePdf Use Case

Renders the invoice of an order as a PDF document.
"""

import logging
from libs.result import Result, Return
from src.app.services.pdf_service import PdfService
from .get_invoice import GetOrderInvoice, order_not_found

logger = logging.getLogger(__name__)


class RenderInvoicePdf:
    """
    Use Case: Generate an order invoice PDF

    Uses the same pricing as GetOrderInvoice.
    """

    def __init__(
        self,
        get_invoice: GetOrderInvoice,
        pdf_service: PdfService,
        currency: str = "USD",
        company_name: str = "Order Management Service",
        company_address: str = "",
    ):
        self.get_invoice = get_invoice
        self.pdf_service = pdf_service
        self.currency = currency
        self.company_name = company_name
        self.company_address = company_address

    async def execute(self, order_id: int) -> Result[bytes]:
        """
        Execute PDF rendering

        Args:
            order_id: Order ID

        Returns:
            Result[bytes]: PDF document, or ORDER_NOT_FOUND
        """
        invoice = await self.get_invoice.load_invoice(order_id)
        if invoice is None:
            return Return.err(order_not_found(order_id))

        pdf_bytes = self.pdf_service.generate_order_invoice(
            order_id=order_id,
            invoice=invoice,
            currency=self.currency,
            company_name=self.company_name,
            company_address=self.company_address,
        )
        logger.debug("Rendered invoice PDF for order %s (%d bytes)", order_id, len(pdf_bytes))

        return Return.ok(pdf_bytes)
