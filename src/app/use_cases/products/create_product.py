"""CreateProduct Use Case

Adds a product to the catalog.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from src.domain.product import Product
from .dtos import CreateProductCommandDTO, ProductResponseDTO

logger = logging.getLogger(__name__)


class CreateProduct:
    """
    Use Case: Create a catalog product

    Business Rules:
    1. Name must not be blank (surrounding whitespace is trimmed)
    2. Price must be non-negative
    3. Discount percentage and threshold are given together or not at all
    4. A percentage of 0 stores no discount
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, command: CreateProductCommandDTO) -> Result[ProductResponseDTO]:
        details = []
        name = (command.name or "").strip()
        if not name:
            details.append({"field": "name", "message": "Name is required."})
        if command.price is None or command.price < 0:
            details.append({"field": "price", "message": "Price must be greater than or equal to 0."})
        if details:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Invalid product",
                    details=details,
                )
            )

        product = Product(name=name, price=command.price)

        percentage = command.discount_percentage
        threshold = command.discount_quantity_threshold
        if (percentage is None) != (threshold is None):
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Discount percentage and quantity threshold must be set together",
                    details=[
                        {"field": "discountPercentage" if percentage is None else "discountQuantityThreshold",
                         "message": "Required when the other discount field is set."}
                    ],
                )
            )
        if percentage:
            try:
                product.set_discount(percentage, threshold)
            except ValueError as e:
                return Return.err(
                    Error(code="VALIDATION_ERROR", message=str(e), reason="Invalid discount")
                )

        try:
            created = await self.product_repo.create(product)
            await self.uow.commit()
        except Exception:
            logger.exception("Failed to create product %r", name)
            await self.uow.rollback()
            raise

        logger.info("Created product %s (%s)", created.id, created.name)
        return Return.ok(ProductResponseDTO.from_entity(created))
