"""Request schemas for Order API

Item fields are loosely typed here; CreateOrder reports every malformed
line together. Only values outside the 32-bit range are rejected up front.
"""

from typing import List, Optional
from pydantic import Field

from src.app.use_cases.dtos import CamelModel, MAX_INT, MIN_INT


class OrderItemRequestSchema(CamelModel):
    product_id: Optional[int] = Field(
        default=None,
        ge=MIN_INT,
        le=MAX_INT,
        description="Product ID (non-zero)"
    )

    quantity: Optional[int] = Field(
        default=None,
        ge=MIN_INT,
        le=MAX_INT,
        description="Quantity (>= 1)"
    )


class CreateOrderRequestSchema(CamelModel):
    """
    Request schema for creating an order

    Used for POST /api/orders endpoint.
    """

    items: Optional[List[Optional[OrderItemRequestSchema]]] = Field(
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
