"""Product Domain Entity

Catalog entry with an optional bulk-quantity discount.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, Integer, Numeric, String
from src.domain.base import BaseModel, IdType, TimestampType, utc_now


class Product(BaseModel, table=True):
    """
    Product - Catalog item that can be ordered

    Domain Rules:
    - name is non-empty
    - price must be non-negative
    - discount_percentage and discount_quantity_threshold are set together
      or cleared together
    - A discount applies to a line only when discount_percentage > 0 and the
      line quantity reaches discount_quantity_threshold
    """

    __tablename__ = "products"
    __table_args__ = (
        Index('ix_products_name', 'name'),
        CheckConstraint('price >= 0', name='price_non_negative'),
        CheckConstraint(
            'discount_percentage IS NULL OR '
            '(discount_percentage >= 0 AND discount_percentage <= 100)',
            name='discount_percentage_range',
        ),
        CheckConstraint(
            'discount_quantity_threshold IS NULL OR discount_quantity_threshold > 0',
            name='discount_threshold_positive',
        ),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique product identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Product display name"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Unit price (precision: 18,2)"
    )

    discount_percentage: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(5, 2), nullable=True),
        description="Discount percentage in [0, 100] (None = no discount)"
    )

    discount_quantity_threshold: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, nullable=True),
        description="Minimum line quantity that triggers the discount"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(TimestampType, nullable=False),
        description="Product creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(TimestampType, nullable=False),
        description="Last update timestamp"
    )

    @property
    def has_discount(self) -> bool:
        """True when a positive discount with a threshold is configured"""
        return (
            self.discount_percentage is not None
            and self.discount_percentage > 0
            and self.discount_quantity_threshold is not None
        )

    def set_discount(self, percentage: Decimal, quantity_threshold: int) -> None:
        """Replace both discount fields"""
        if percentage < 0 or percentage > 100:
            raise ValueError("Discount percentage must be between 0 and 100")
        if quantity_threshold < 1:
            raise ValueError("Quantity threshold must be greater than 0")
        self.discount_percentage = percentage
        self.discount_quantity_threshold = quantity_threshold
        self.updated_at = utc_now()

    def clear_discount(self) -> None:
        self.discount_percentage = None
        self.discount_quantity_threshold = None
        self.updated_at = utc_now()

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Widget",
                "price": "100.00",
                "discount_percentage": "15.00",
                "discount_quantity_threshold": 10,
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z"
            }
        }
