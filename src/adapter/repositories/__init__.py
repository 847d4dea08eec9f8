from .product_repository import SqlAlchemyProductRepository
from .order_repository import SqlAlchemyOrderRepository
from .order_item_repository import SqlAlchemyOrderItemRepository

__all__ = [
    "SqlAlchemyProductRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyOrderItemRepository",
]
