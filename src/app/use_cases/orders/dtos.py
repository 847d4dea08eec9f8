"""Data Transfer Objects for Order Use Cases"""

from typing import List, Optional
from pydantic import Field

from src.app.use_cases.dtos import CamelModel, DecimalString
from src.domain.order import Order, OrderItem
from src.domain.pricing import OrderInvoice


class OrderItemCommandDTO(CamelModel):
    """
    One requested order line

    Fields are optional so that every malformed line can be reported at once.
    """

    product_id: Optional[int] = Field(default=None, description="Product ID")

    quantity: Optional[int] = Field(default=None, description="Quantity (>= 1)")


class CreateOrderCommandDTO(CamelModel):
    """
    Command DTO for creating an order
    """

    items: Optional[List[Optional[OrderItemCommandDTO]]] = Field(
        default=None,
        description="Order lines (at least one)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "items": [
                    {"productId": 1, "quantity": 2},
                    {"productId": 2, "quantity": 10}
                ]
            }
        }


class OrderItemDTO(CamelModel):
    product_id: int = Field(..., description="Product ID")

    quantity: int = Field(..., description="Ordered quantity")


class OrderResponseDTO(CamelModel):
    """
    Response DTO for an order and its lines
    """

    id: int = Field(..., description="Order ID")

    items: List[OrderItemDTO] = Field(default_factory=list, description="Order lines")

    @classmethod
    def from_entities(cls, order: Order, items: List[OrderItem]) -> "OrderResponseDTO":
        return cls(
            id=order.id,
            items=[OrderItemDTO(product_id=item.product_id, quantity=item.quantity) for item in items],
        )


class InvoiceProductDTO(CamelModel):
    """
    One priced invoice line
    """

    product_name: str = Field(..., description="Product name")

    quantity: int = Field(..., description="Ordered quantity")

    discount_percent: DecimalString = Field(..., description="Applied discount percentage (0 = none)")

    amount: DecimalString = Field(..., description="Line amount after discount")


class InvoiceResponseDTO(CamelModel):
    """
    Response DTO for an order invoice
    """

    products: List[InvoiceProductDTO] = Field(default_factory=list, description="Invoice lines")

    total_amount: DecimalString = Field(..., description="Sum of line amounts")

    @classmethod
    def from_invoice(cls, invoice: OrderInvoice) -> "InvoiceResponseDTO":
        return cls(
            products=[
                InvoiceProductDTO(
                    product_name=line.product_name,
                    quantity=line.quantity,
                    discount_percent=line.discount_percent,
                    amount=line.amount,
                )
                for line in invoice.lines
            ],
            total_amount=invoice.total_amount,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "products": [
                    {
                        "productName": "Widget",
                        "quantity": 10,
                        "discountPercent": "15.00",
                        "amount": "850.00"
                    }
                ],
                "totalAmount": "850.00"
            }
        }
