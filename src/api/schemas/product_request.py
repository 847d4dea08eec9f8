"""Request schemas for Product API

Pydantic models for validating incoming HTTP requests.
"""

from decimal import Decimal
from typing import Optional
from pydantic import Field, field_validator

from src.app.use_cases.dtos import CamelModel, MAX_INT


class CreateProductRequestSchema(CamelModel):
    """
    Request schema for creating a product

    Used for POST /api/products endpoint.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Product name (required, non-blank)"
    )

    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=18,
        decimal_places=2,
        description="Unit price (must be >= 0)"
    )

    discount_percentage: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=100,
        description="Optional discount percentage in [0, 100]"
    )

    discount_quantity_threshold: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_INT,
        description="Optional quantity threshold for the discount"
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Reject names made only of whitespace"""
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Widget",
                "price": "100.00",
                "discountPercentage": "15.00",
                "discountQuantityThreshold": 10
            }
        }


class ApplyDiscountRequestSchema(CamelModel):
    """
    Request schema for setting a product discount

    Used for PUT /api/products/{id}/discount endpoint.
    A percentage of 0 clears the discount.
    """

    percentage: Decimal = Field(
        ...,
        ge=0,
        le=100,
        description="Discount percentage in [0, 100]"
    )

    quantity_threshold: int = Field(
        default=0,
        ge=0,
        le=MAX_INT,
        description="Minimum quantity that triggers the discount (>= 1 unless clearing)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "percentage": "15.00",
                "quantityThreshold": 10
            }
        }
