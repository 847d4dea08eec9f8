"""SQLAlchemy Order Repository Implementation

Orders and their items are written in the caller's transaction; items are
loaded with one extra query per page instead of lazy navigation.
"""

from collections import defaultdict
from typing import List, Optional, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.order_repository import OrderRepository, OrderWithItems
from src.domain.order import Order, OrderItem


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, order: Order, items: List[OrderItem]) -> OrderWithItems:
        """
        Create an order and its items

        Flushes the order to obtain its ID, then flushes the items. Nothing
        is committed here; the unit of work owns the transaction.

        Args:
            order: Order entity to persist
            items: Items of the order

        Returns:
            Tuple of (created Order, created OrderItems)
        """
        self.session.add(order)
        await self.session.flush()
        await self.session.refresh(order)

        for item in items:
            item.order_id = order.id
        self.session.add_all(items)
        await self.session.flush()

        return order, items

    async def get_by_id(self, order_id: int) -> Optional[Order]:
        statement = select(Order).where(Order.id == order_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_paginated(self, limit: int = 10, offset: int = 0) -> Tuple[List[OrderWithItems], int]:
        count_statement = select(func.count()).select_from(Order)
        total = (await self.session.execute(count_statement)).scalar_one()

        statement = select(Order).order_by(Order.id).limit(limit).offset(offset)
        result = await self.session.execute(statement)
        orders = list(result.scalars().all())
        if not orders:
            return [], total

        items_statement = (
            select(OrderItem)
            .where(OrderItem.order_id.in_([order.id for order in orders]))
            .order_by(OrderItem.id)
        )
        items_result = await self.session.execute(items_statement)

        items_by_order = defaultdict(list)
        for item in items_result.scalars().all():
            items_by_order[item.order_id].append(item)

        return [(order, items_by_order[order.id]) for order in orders], total
