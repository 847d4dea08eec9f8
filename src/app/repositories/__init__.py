from .product_repository import ProductRepository
from .order_repository import OrderRepository, OrderWithItems
from .order_item_repository import OrderItemRepository

__all__ = [
    "ProductRepository",
    "OrderRepository",
    "OrderWithItems",
    "OrderItemRepository",
]
