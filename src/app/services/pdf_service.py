"""PDF Generation Service Interface

Defines the contract for rendering order invoices as PDF documents.
"""

from abc import ABC, abstractmethod
from src.domain.pricing import OrderInvoice


class PdfService(ABC):
    """
    Service interface for PDF generation
    """

    @abstractmethod
    def generate_order_invoice(
        self,
        order_id: int,
        invoice: OrderInvoice,
        currency: str = "USD",
        company_name: str = "Order Management Service",
        company_address: str = "",
    ) -> bytes:
        """
        Generate an invoice PDF for an order

        Args:
            order_id: Order the invoice belongs to
            invoice: Computed invoice breakdown
            currency: Currency code printed next to amounts
            company_name: Company name to display on invoice
            company_address: Company address to display on invoice

        Returns:
            PDF document as bytes
        """
        pass
