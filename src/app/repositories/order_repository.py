"""Order Repository Interface

Defines the contract for order persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.order import Order, OrderItem

OrderWithItems = Tuple[Order, List[OrderItem]]


class OrderRepository(ABC):
    """
    Repository interface for Order persistence

    Orders are always written together with their items.
    """

    @abstractmethod
    async def create(self, order: Order, items: List[OrderItem]) -> OrderWithItems:
        """
        Create an order and its items

        The order ID is assigned first and copied onto every item.

        Args:
            order: Order entity to persist
            items: Items of the order (order_id is filled in)

        Returns:
            Tuple of (created Order, created OrderItems)
        """
        pass

    @abstractmethod
    async def get_by_id(self, order_id: int) -> Optional[Order]:
        """
        Retrieve order by ID

        Args:
            order_id: Order ID

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_paginated(self, limit: int = 10, offset: int = 0) -> Tuple[List[OrderWithItems], int]:
        """
        List orders ordered by ID with their items loaded

        Args:
            limit: Maximum number of orders to return
            offset: Number of orders to skip

        Returns:
            Tuple of (page of orders with items, total order count)
        """
        pass
