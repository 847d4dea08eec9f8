"""ListProducts Use Case

Pages through the catalog with an optional name filter.
"""

from typing import Optional
from libs.result import Result, Return
from src.app.repositories.product_repository import ProductRepository
from src.app.use_cases.dtos import PageDTO, PageQueryDTO
from .dtos import ProductResponseDTO


class ListProducts:
    """
    Use case: List products

    The name filter is a case-insensitive substring match applied before
    counting and paging. Products are ordered by ID.
    """

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(
        self, query: PageQueryDTO, name: Optional[str] = None
    ) -> Result[PageDTO[ProductResponseDTO]]:
        """
        List products

        Args:
            query: Page number and size
            name: Optional name filter

        Returns:
            Result[PageDTO[ProductResponseDTO]]: Requested page and total count
        """
        products, total = await self.product_repo.list_paginated(
            name=name,
            limit=query.limit,
            offset=query.offset,
        )

        return Return.ok(
            PageDTO[ProductResponseDTO](
                items=[ProductResponseDTO.from_entity(product) for product in products],
                total_count=total,
                page=query.page,
                page_size=query.page_size,
            )
        )
