"""Product API Routes

FastAPI routes for catalog operations.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.product_request import CreateProductRequestSchema, ApplyDiscountRequestSchema
from src.app.use_cases.dtos import MAX_INT, MIN_INT, MAX_PAGE_SIZE, PageDTO, PageQueryDTO
from src.app.use_cases.products import (
    CreateProduct,
    ListProducts,
    ApplyDiscount,
    CreateProductCommandDTO,
    ApplyDiscountCommandDTO,
    ProductResponseDTO,
)
from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/products", tags=["Products"])

VALIDATION_ERROR_RESPONSE = {
    "description": "Validation error",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Invalid request parameters",
                    "details": [{"field": "price", "message": "Input should be greater than or equal to 0"}]
                }
            }
        }
    }
}


@router.post(
    "",
    response_model=ProductResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={400: VALIDATION_ERROR_RESPONSE},
)
async def create_product(
    request: CreateProductRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create a catalog product.

    **Request body:**
    - `name` (required): Product name, not blank
    - `price` (required): Unit price, >= 0
    - `discountPercentage` (optional): Discount percentage in [0, 100]
    - `discountQuantityThreshold` (optional): Quantity that triggers the discount

    Decimal fields may be sent as numbers or strings; responses always carry
    them as strings (`"price": "9.99"`).

    **Returns:**
    - 201: Product created
    - 400: Invalid name, price or discount
    """
    uow = SqlAlchemyUnitOfWork(session)
    product_repo = SqlAlchemyProductRepository(session)

    command = CreateProductCommandDTO(
        name=request.name,
        price=request.price,
        discount_percentage=request.discount_percentage,
        discount_quantity_threshold=request.discount_quantity_threshold,
    )

    use_case = CreateProduct(uow, product_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "",
    response_model=PageDTO[ProductResponseDTO],
    status_code=status.HTTP_200_OK,
    responses={400: VALIDATION_ERROR_RESPONSE},
)
async def list_products(
    name: Optional[str] = Query(default=None, description="Case-insensitive name filter"),
    page: int = Query(default=1, ge=1, le=MAX_INT, description="1-based page number"),
    page_size: int = Query(default=10, ge=1, le=MAX_PAGE_SIZE, alias="pageSize", description="Items per page"),
    session: AsyncSession = Depends(get_session)
):
    """
    List products, optionally filtered by name.

    **Query parameters:**
    - `name` (optional): Substring to search for in product names (case-insensitive)
    - `page` (optional, default 1): Page number, >= 1
    - `pageSize` (optional, default 10): Page size, 1..100

    **Returns:**
    - 200: Page of products with `totalCount`
    - 400: Invalid pagination parameters
    """
    product_repo = SqlAlchemyProductRepository(session)

    use_case = ListProducts(product_repo)
    result = await use_case.execute(PageQueryDTO(page=page, page_size=page_size), name=name)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put(
    "/{product_id}/discount",
    response_model=ProductResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Product not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "PRODUCT_NOT_FOUND",
                            "message": "Product with ID 123 not found"
                        }
                    }
                }
            }
        },
        400: {
            "description": "Invalid discount",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVALID_DISCOUNT",
                            "message": "Quantity threshold must be greater than 0."
                        }
                    }
                }
            }
        }
    }
)
async def apply_discount(
    request: ApplyDiscountRequestSchema,
    product_id: int = Path(..., ge=MIN_INT, le=MAX_INT, description="Product ID"),
    session: AsyncSession = Depends(get_session)
):
    """
    Set or clear the bulk-quantity discount of a product.

    A `percentage` of 0 clears the discount; otherwise `quantityThreshold`
    must be at least 1.

    **Returns:**
    - 200: Updated product
    - 400: Percentage or threshold out of range
    - 404: Product not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    product_repo = SqlAlchemyProductRepository(session)

    command = ApplyDiscountCommandDTO(
        percentage=request.percentage,
        quantity_threshold=request.quantity_threshold,
    )

    use_case = ApplyDiscount(uow, product_repo)
    result = await use_case.execute(product_id, command)

    if result.is_err():
        if result.error.code == "PRODUCT_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)

    return result.value
