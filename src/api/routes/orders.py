"""Order API Routes

FastAPI routes for order creation, listing and invoicing.
"""

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.order_request import CreateOrderRequestSchema
from src.app.use_cases.dtos import MAX_INT, MIN_INT, MAX_PAGE_SIZE, PageDTO, PageQueryDTO
from src.app.use_cases.orders import (
    CreateOrder,
    ListOrders,
    GetOrderInvoice,
    RenderInvoicePdf,
    CreateOrderCommandDTO,
    OrderItemCommandDTO,
    OrderResponseDTO,
    InvoiceResponseDTO,
)
from src.adapter.repositories.order_repository import SqlAlchemyOrderRepository
from src.adapter.repositories.order_item_repository import SqlAlchemyOrderItemRepository
from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.adapter.services.pdf_service import ReportLabPdfService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/orders", tags=["Orders"])

ORDER_NOT_FOUND_RESPONSE = {
    "description": "Order not found",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "ORDER_NOT_FOUND",
                    "message": "Order with ID 123 not found"
                }
            }
        }
    }
}


@router.post(
    "",
    response_model=OrderResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Invalid items",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "One or more order items are invalid.",
                            "details": [
                                {"field": "items[0].quantity", "message": "Quantity must be at least 1."}
                            ]
                        }
                    }
                }
            }
        },
        404: {
            "description": "Unknown product",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "PRODUCTS_NOT_FOUND",
                            "message": "One or more products not found."
                        }
                    }
                }
            }
        }
    }
)
async def create_order(
    request: CreateOrderRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create an order from a list of product/quantity lines.

    **Example request:**
    ```json
    {"items": [{"productId": 1, "quantity": 2}, {"productId": 2, "quantity": 10}]}
    ```

    **Returns:**
    - 201: Order created with its items
    - 400: Empty item list or invalid items (all offending items are listed)
    - 404: One or more products do not exist
    """
    uow = SqlAlchemyUnitOfWork(session)
    order_repo = SqlAlchemyOrderRepository(session)
    product_repo = SqlAlchemyProductRepository(session)

    items = None
    if request.items is not None:
        items = [
            OrderItemCommandDTO(product_id=item.product_id, quantity=item.quantity) if item else None
            for item in request.items
        ]
    command = CreateOrderCommandDTO(items=items)

    use_case = CreateOrder(uow, order_repo, product_repo)
    result = await use_case.execute(command)

    if result.is_err():
        if result.error.code == "PRODUCTS_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)

    return result.value


@router.get(
    "",
    response_model=PageDTO[OrderResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def list_orders(
    page: int = Query(default=1, ge=1, le=MAX_INT, description="1-based page number"),
    page_size: int = Query(default=10, ge=1, le=MAX_PAGE_SIZE, alias="pageSize", description="Items per page"),
    session: AsyncSession = Depends(get_session)
):
    """
    List orders with their items.

    **Returns:**
    - 200: Page of orders with `totalCount`
    - 400: Invalid pagination parameters
    """
    order_repo = SqlAlchemyOrderRepository(session)

    use_case = ListOrders(order_repo)
    result = await use_case.execute(PageQueryDTO(page=page, page_size=page_size))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


def _get_invoice_use_case(session: AsyncSession) -> GetOrderInvoice:
    return GetOrderInvoice(
        SqlAlchemyOrderRepository(session),
        SqlAlchemyOrderItemRepository(session),
        SqlAlchemyProductRepository(session),
    )


@router.get(
    "/{order_id}/invoice",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: ORDER_NOT_FOUND_RESPONSE},
)
async def get_order_invoice(
    order_id: int = Path(..., ge=MIN_INT, le=MAX_INT, description="Order ID"),
    session: AsyncSession = Depends(get_session)
):
    """
    Compute the invoice of an order.

    Each line shows the applied discount percentage (0 when the quantity is
    below the product's threshold) and the discounted amount.

    Percentages and amounts are JSON strings with two decimal places, or
    more when the exact amount needs them (e.g. `"850.00"`, `"0.46669"`).

    **Returns:**
    - 200: Invoice lines and total
    - 404: Order not found
    """
    use_case = _get_invoice_use_case(session)
    result = await use_case.execute(order_id)

    if result.is_err():
        if result.error.code == "ORDER_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{order_id}/invoice/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        404: ORDER_NOT_FOUND_RESPONSE,
    }
)
async def download_order_invoice_pdf(
    order_id: int = Path(..., ge=MIN_INT, le=MAX_INT, description="Order ID"),
    session: AsyncSession = Depends(get_session)
):
    """
    Download the invoice of an order as a PDF file.

    **Returns:**
    - 200: PDF file as binary response
    - 404: Order not found
    """
    use_case = RenderInvoicePdf(
        _get_invoice_use_case(session),
        ReportLabPdfService(),
        currency=ApplicationConfig.CURRENCY,
        company_name=ApplicationConfig.INVOICE_COMPANY_NAME,
        company_address=ApplicationConfig.INVOICE_COMPANY_ADDRESS,
    )
    result = await use_case.execute(order_id)

    if result.is_err():
        if result.error.code == "ORDER_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)

    return Response(
        content=result.value,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=invoice_order_{order_id}.pdf"
        }
    )
