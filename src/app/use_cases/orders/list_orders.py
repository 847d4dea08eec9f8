"""
List Orders Use Case

Retrieves orders with their items, one page at a time.
"""
from libs.result import Result, Return
from src.app.repositories.order_repository import OrderRepository
from src.app.use_cases.dtos import PageDTO, PageQueryDTO
from .dtos import OrderResponseDTO


class ListOrders:
    """
    Use case: List orders

    Orders are ordered by ID; items are loaded for the page in one query.
    """

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    async def execute(self, query: PageQueryDTO) -> Result[PageDTO[OrderResponseDTO]]:
        orders, total = await self.order_repo.list_paginated(
            limit=query.limit,
            offset=query.offset,
        )

        return Return.ok(
            PageDTO[OrderResponseDTO](
                items=[OrderResponseDTO.from_entities(order, items) for order, items in orders],
                total_count=total,
                page=query.page,
                page_size=query.page_size,
            )
        )
