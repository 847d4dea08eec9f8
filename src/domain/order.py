"""Order Domain Entities

An Order owns one or more OrderItems. Orders are immutable once created.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, ForeignKey, Integer
from src.domain.base import BaseModel, IdType, TimestampType, utc_now


class Order(BaseModel, table=True):
    """
    Order - A customer order

    Domain Rules:
    - Has at least one OrderItem at creation
    - No update or delete after creation
    """

    __tablename__ = "orders"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique order identifier (auto-increment)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(TimestampType, nullable=False),
        description="Order creation timestamp"
    )


class OrderItem(BaseModel, table=True):
    """
    Order Item - One product/quantity line of an order

    Domain Rules:
    - Belongs to exactly one order
    - quantity >= 1
    - References a product by id; product lifecycle is independent
    """

    __tablename__ = "order_items"
    __table_args__ = (
        Index('ix_order_items_order_id', 'order_id'),
        Index('ix_order_items_product_id', 'product_id'),
        CheckConstraint('quantity >= 1', name='quantity_positive'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique order item identifier (auto-increment)"
    )

    order_id: int = Field(
        sa_column=Column(IdType, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Order"
    )

    product_id: int = Field(
        sa_column=Column(IdType, ForeignKey("products.id"), nullable=False),
        description="Foreign key to Product"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Ordered quantity (>= 1)"
    )
