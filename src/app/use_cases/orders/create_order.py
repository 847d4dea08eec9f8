"""CreateOrder Use Case

Validates requested lines and persists an order with its items.
"""

import logging
from typing import Any, Dict, List
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.order_repository import OrderRepository
from src.app.repositories.product_repository import ProductRepository
from src.domain.order import Order, OrderItem
from .dtos import CreateOrderCommandDTO, OrderItemCommandDTO, OrderResponseDTO

logger = logging.getLogger(__name__)


def validate_order_items(items: List[OrderItemCommandDTO]) -> List[Dict[str, Any]]:
    """
    Collect a problem entry for every malformed line

    Returns:
        Empty list when all lines are valid
    """
    details = []
    for index, item in enumerate(items):
        if item is None:
            details.append({"field": f"items[{index}]", "message": "Order item cannot be null."})
            continue
        if item.product_id is None or item.product_id == 0:
            details.append({
                "field": f"items[{index}].productId",
                "message": "ProductId is required and must be greater than 0.",
            })
        if item.quantity is None or item.quantity < 1:
            details.append({
                "field": f"items[{index}].quantity",
                "message": "Quantity must be at least 1.",
            })
    return details


class CreateOrder:
    """
    Use Case: Create an order

    Business Rules:
    1. At least one item is required
    2. Every item needs a non-zero product ID and a quantity >= 1; all offending
       items are reported together
    3. Every referenced product must exist, checked with one lookup of the
       distinct product IDs
    4. Order and items are committed together or not at all

    Flow:
    1. Validate item list shape
    2. Load referenced products
    3. Create order and items
    4. Commit transaction
    5. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ):
        self.uow = uow
        self.order_repo = order_repo
        self.product_repo = product_repo

    async def execute(self, command: CreateOrderCommandDTO) -> Result[OrderResponseDTO]:
        """
        Execute order creation

        Args:
            command: CreateOrderCommandDTO with requested items

        Returns:
            Result[OrderResponseDTO]: Created order or error

        Errors:
            VALIDATION_ERROR: Empty item list or malformed items
            PRODUCTS_NOT_FOUND: One or more product IDs do not exist
        """
        # Step 1: Validate shape
        if not command.items:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="At least one item is required.",
                    details=[{"field": "items", "message": "At least one item is required."}],
                )
            )

        details = validate_order_items(command.items)
        if details:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="One or more order items are invalid.",
                    details=details,
                )
            )

        # Step 2: Check that all products exist
        requested_ids = {item.product_id for item in command.items}
        products = await self.product_repo.get_by_ids(requested_ids)
        missing_ids = sorted(requested_ids - {product.id for product in products})
        if missing_ids:
            return Return.err(
                Error(
                    code="PRODUCTS_NOT_FOUND",
                    message="One or more products not found.",
                    reason=f"Unknown product IDs: {', '.join(str(i) for i in missing_ids)}",
                    details=[
                        {"field": "productId", "value": product_id, "message": "Product not found."}
                        for product_id in missing_ids
                    ],
                )
            )

        # Step 3: Create order with items
        items = [
            OrderItem(product_id=item.product_id, quantity=item.quantity)
            for item in command.items
        ]
        try:
            order, created_items = await self.order_repo.create(Order(), items)

            # Step 4: Commit transaction
            await self.uow.commit()
        except Exception:
            logger.exception("Failed to create order with %d items", len(items))
            await self.uow.rollback()
            raise

        logger.info("Created order %s with %d items", order.id, len(created_items))

        # Step 5: Build response
        return Return.ok(OrderResponseDTO.from_entities(order, created_items))
