"""DiscountedProductsReport Use Case

Reports how often each product discount was triggered across all orders.
"""

from collections import defaultdict
from typing import List
from libs.result import Result, Return
from src.app.repositories.order_item_repository import OrderItemRepository
from src.app.repositories.product_repository import ProductRepository
from src.domain.discount_report import build_discount_report
from .dtos import DiscountedProductReportItemDTO


class DiscountedProductsReport:
    """
    Use case: Discounted products report

    Business Rules:
    1. Only products with a positive percentage and a threshold are considered
    2. Products whose lines never reached the threshold are left out
    3. Totals use each product's current discount percentage
    """

    def __init__(
        self,
        product_repo: ProductRepository,
        order_item_repo: OrderItemRepository,
    ):
        self.product_repo = product_repo
        self.order_item_repo = order_item_repo

    async def execute(self) -> Result[List[DiscountedProductReportItemDTO]]:
        products = await self.product_repo.get_discounted()
        if not products:
            return Return.ok([])

        items = await self.order_item_repo.get_by_product_ids(product.id for product in products)
        items_by_product = defaultdict(list)
        for item in items:
            items_by_product[item.product_id].append(item)

        rows = build_discount_report(products, items_by_product)
        return Return.ok([DiscountedProductReportItemDTO.from_row(row) for row in rows])
