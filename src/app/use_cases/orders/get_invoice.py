"""GetOrderInvoice Use Case

Prices every line of an order and totals them.
"""

from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.order_repository import OrderRepository
from src.app.repositories.order_item_repository import OrderItemRepository
from src.app.repositories.product_repository import ProductRepository
from src.domain.pricing import OrderInvoice, compute_invoice
from .dtos import InvoiceResponseDTO


def order_not_found(order_id: int) -> Error:
    return Error(
        code="ORDER_NOT_FOUND",
        message=f"Order with ID {order_id} not found",
        reason="Order does not exist",
    )


class GetOrderInvoice:
    """
    Use Case: Compute the invoice of an order

    Read-only. Products are priced with their current price and discount.

    Flow:
    1. Retrieve order by ID
    2. Retrieve its items
    3. Load referenced products with one query
    4. Compute invoice
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        order_item_repo: OrderItemRepository,
        product_repo: ProductRepository,
    ):
        self.order_repo = order_repo
        self.order_item_repo = order_item_repo
        self.product_repo = product_repo

    async def load_invoice(self, order_id: int) -> Optional[OrderInvoice]:
        """
        Compute the invoice of an order

        Args:
            order_id: Order ID

        Returns:
            OrderInvoice, or None when the order does not exist
        """
        order = await self.order_repo.get_by_id(order_id)
        if not order:
            return None

        items = await self.order_item_repo.get_by_order_id(order.id)
        products = await self.product_repo.get_by_ids(item.product_id for item in items)
        products_by_id = {product.id: product for product in products}

        return compute_invoice(items, products_by_id)

    async def execute(self, order_id: int) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice computation

        Args:
            order_id: Order ID

        Returns:
            Result[InvoiceResponseDTO]: Invoice lines and total, or ORDER_NOT_FOUND
        """
        invoice = await self.load_invoice(order_id)
        if invoice is None:
            return Return.err(order_not_found(order_id))

        return Return.ok(InvoiceResponseDTO.from_invoice(invoice))
