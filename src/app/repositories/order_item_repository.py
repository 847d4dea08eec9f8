"""Order Item Repository Interface

Read access to order lines for invoicing and reporting.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List
from src.domain.order import OrderItem


class OrderItemRepository(ABC):

    @abstractmethod
    async def get_by_order_id(self, order_id: int) -> List[OrderItem]:
        """
        Retrieve all items of an order

        Args:
            order_id: Order ID

        Returns:
            Items in insertion order
        """
        pass

    @abstractmethod
    async def get_by_product_ids(self, product_ids: Iterable[int]) -> List[OrderItem]:
        """
        Retrieve every historical order item referencing any of product_ids

        Args:
            product_ids: Product IDs

        Returns:
            Matching order items
        """
        pass
