"""SQLAlchemy Product Repository Implementation

Implements catalog persistence using SQLAlchemy async session.
"""

from typing import Iterable, List, Optional, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.product_repository import ProductRepository
from src.domain.base import utc_now
from src.domain.product import Product


class SqlAlchemyProductRepository(ProductRepository):
    """
    SQLAlchemy implementation of ProductRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, product: Product) -> Product:
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        statement = select(Product).where(Product.id == product_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, product_ids: Iterable[int]) -> List[Product]:
        ids = set(product_ids)
        if not ids:
            return []

        statement = select(Product).where(Product.id.in_(ids)).order_by(Product.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_paginated(
        self,
        name: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> Tuple[List[Product], int]:
        """
        List products ordered by ID

        The name filter is matched case-insensitively anywhere in the name;
        LIKE wildcards in the filter are matched literally. A blank filter is
        ignored; otherwise the text is matched as given, spaces included.

        Args:
            name: Optional substring filter
            limit: Maximum number of products to return
            offset: Number of matching products to skip

        Returns:
            Tuple of (page of products, total matching count)
        """
        count_statement = select(func.count()).select_from(Product)
        statement = select(Product)

        if name and name.strip():
            condition = func.lower(Product.name).contains(name.lower(), autoescape=True)
            count_statement = count_statement.where(condition)
            statement = statement.where(condition)

        total = (await self.session.execute(count_statement)).scalar_one()

        statement = statement.order_by(Product.id).limit(limit).offset(offset)
        result = await self.session.execute(statement)
        return list(result.scalars().all()), total

    async def get_discounted(self) -> List[Product]:
        statement = (
            select(Product)
            .where(Product.discount_percentage.is_not(None))
            .where(Product.discount_percentage > 0)
            .where(Product.discount_quantity_threshold.is_not(None))
            .order_by(Product.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, product: Product) -> Product:
        product.updated_at = utc_now()
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product
