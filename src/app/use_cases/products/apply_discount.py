"""ApplyDiscount Use Case

Replaces or clears the bulk-quantity discount of a product.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from .dtos import ApplyDiscountCommandDTO, ProductResponseDTO

logger = logging.getLogger(__name__)


class ApplyDiscount:
    """
    Use Case: Set a product discount

    Business Rules:
    1. Product must exist
    2. Percentage must be within [0, 100]
    3. Percentage 0 clears both discount fields; the threshold is ignored
    4. A positive percentage requires a threshold of at least 1
    5. Both fields are always written together
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, product_id: int, command: ApplyDiscountCommandDTO) -> Result[ProductResponseDTO]:
        """
        Execute discount update

        Args:
            product_id: Product to update
            command: New percentage and quantity threshold

        Returns:
            Result[ProductResponseDTO]: Updated product or error

        Errors:
            PRODUCT_NOT_FOUND: No product with product_id
            INVALID_DISCOUNT: Percentage or threshold out of range
        """
        if command.percentage < 0 or command.percentage > 100:
            return self._invalid("percentage", "Discount percentage must be between 0 and 100.")

        clear = command.percentage == 0
        if not clear and command.quantity_threshold < 1:
            return self._invalid("quantityThreshold", "Quantity threshold must be greater than 0.")

        product = await self.product_repo.get_by_id(product_id)
        if not product:
            return Return.err(
                Error(
                    code="PRODUCT_NOT_FOUND",
                    message=f"Product with ID {product_id} not found",
                )
            )

        if clear:
            product.clear_discount()
        else:
            product.set_discount(command.percentage, command.quantity_threshold)

        try:
            updated = await self.product_repo.update(product)
            await self.uow.commit()
        except Exception:
            logger.exception("Failed to update discount of product %s", product_id)
            await self.uow.rollback()
            raise

        if clear:
            logger.info("Product %s discount cleared", updated.id)
        else:
            logger.info(
                "Product %s discount set to %s%% from quantity %s",
                updated.id,
                updated.discount_percentage,
                updated.discount_quantity_threshold,
            )
        return Return.ok(ProductResponseDTO.from_entity(updated))

    @staticmethod
    def _invalid(field: str, message: str) -> Result[ProductResponseDTO]:
        return Return.err(
            Error(
                code="INVALID_DISCOUNT",
                message=message,
                details=[{"field": field, "message": message}],
            )
        )
