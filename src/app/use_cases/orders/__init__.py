"""Order use cases"""
from .create_order import CreateOrder
from .list_orders import ListOrders
from .get_invoice import GetOrderInvoice
from .render_invoice_pdf import RenderInvoicePdf
from .dtos import (
    OrderItemCommandDTO,
    CreateOrderCommandDTO,
    OrderItemDTO,
    OrderResponseDTO,
    InvoiceProductDTO,
    InvoiceResponseDTO,
)

__all__ = [
    "CreateOrder",
    "ListOrders",
    "GetOrderInvoice",
    "RenderInvoicePdf",
    "OrderItemCommandDTO",
    "CreateOrderCommandDTO",
    "OrderItemDTO",
    "OrderResponseDTO",
    "InvoiceProductDTO",
    "InvoiceResponseDTO",
]
