"""SQLAlchemy implementation of OrderItemRepository"""

from typing import Iterable, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.order_item_repository import OrderItemRepository
from src.domain.order import OrderItem


class SqlAlchemyOrderItemRepository(OrderItemRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_order_id(self, order_id: int) -> List[OrderItem]:
        statement = (
            select(OrderItem)
            .where(OrderItem.order_id == order_id)
            .order_by(OrderItem.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_product_ids(self, product_ids: Iterable[int]) -> List[OrderItem]:
        ids = set(product_ids)
        if not ids:
            return []

        statement = (
            select(OrderItem)
            .where(OrderItem.product_id.in_(ids))
            .order_by(OrderItem.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
