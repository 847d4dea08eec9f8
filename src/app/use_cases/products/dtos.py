"""Data Transfer Objects for Product Use Cases"""

from decimal import Decimal
from typing import Optional
from pydantic import Field

from src.app.use_cases.dtos import CamelModel, DecimalString
from src.domain.product import Product


class CreateProductCommandDTO(CamelModel):
    """
    Command DTO for creating a product

    Discount fields are optional but must be supplied together.
    """

    name: str = Field(..., description="Product name")

    price: Decimal = Field(..., description="Unit price")

    discount_percentage: Optional[Decimal] = Field(
        default=None,
        description="Discount percentage in [0, 100]"
    )

    discount_quantity_threshold: Optional[int] = Field(
        default=None,
        description="Minimum quantity that triggers the discount"
    )


class ApplyDiscountCommandDTO(CamelModel):
    """
    Command DTO for replacing or clearing a product discount

    A percentage of 0 clears the discount.
    """

    percentage: Decimal = Field(..., description="Discount percentage in [0, 100]")

    quantity_threshold: int = Field(
        default=0,
        description="Minimum quantity that triggers the discount"
    )


class ProductResponseDTO(CamelModel):
    """
    Response DTO for product operations
    """

    id: int = Field(..., description="Product ID")

    name: str = Field(..., description="Product name")

    price: DecimalString = Field(..., description="Unit price")

    discount_percentage: Optional[DecimalString] = Field(
        default=None,
        description="Discount percentage (None = no discount)"
    )

    discount_quantity_threshold: Optional[int] = Field(
        default=None,
        description="Discount quantity threshold (None = no discount)"
    )

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponseDTO":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            discount_percentage=product.discount_percentage,
            discount_quantity_threshold=product.discount_quantity_threshold,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Widget",
                "price": "100.00",
                "discountPercentage": "15.00",
                "discountQuantityThreshold": 10
            }
        }
