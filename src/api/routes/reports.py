"""Report API Routes"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.reports import DiscountedProductsReport, DiscountedProductReportItemDTO
from src.adapter.repositories.order_item_repository import SqlAlchemyOrderItemRepository
from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get(
    "/discounted-products",
    response_model=List[DiscountedProductReportItemDTO],
    status_code=status.HTTP_200_OK,
)
async def get_discounted_products_report(
    session: AsyncSession = Depends(get_session)
):
    """
    Report discount usage per discounted product.

    Lists every product with an active discount that at least one order
    line qualified for, with the number of distinct orders and the total
    discounted amount.

    `discountPercent` and `totalAmount` are decimal strings such as `"15.00"`.

    **Returns:**
    - 200: Report rows (empty list when no discount was ever triggered)
    """
    use_case = DiscountedProductsReport(
        SqlAlchemyProductRepository(session),
        SqlAlchemyOrderItemRepository(session),
    )
    result = await use_case.execute()

    if result.is_err():
        raise ClientError(result.error)

    return result.value
