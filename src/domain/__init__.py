from .base import BaseModel
from .product import Product
from .order import Order, OrderItem
from .pricing import LineAmount, InvoiceLine, OrderInvoice, compute_line_amount, compute_invoice
from .discount_report import DiscountReportRow, build_discount_report

__all__ = [
    "BaseModel",
    "Product",
    "Order",
    "OrderItem",
    "LineAmount",
    "InvoiceLine",
    "OrderInvoice",
    "compute_line_amount",
    "compute_invoice",
    "DiscountReportRow",
    "build_discount_report",
]
