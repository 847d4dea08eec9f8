"""Data Transfer Objects for Report Use Cases"""

from pydantic import Field

from src.app.use_cases.dtos import CamelModel, DecimalString
from src.domain.discount_report import DiscountReportRow


class DiscountedProductReportItemDTO(CamelModel):
    """
    One row of the discounted products report
    """

    product_name: str = Field(..., description="Product name")

    discount_percent: DecimalString = Field(..., description="Current discount percentage")

    number_of_orders: int = Field(..., description="Distinct orders with a qualifying line")

    total_amount: DecimalString = Field(..., description="Discounted revenue of qualifying lines")

    @classmethod
    def from_row(cls, row: DiscountReportRow) -> "DiscountedProductReportItemDTO":
        return cls(
            product_name=row.product_name,
            discount_percent=row.discount_percent,
            number_of_orders=row.number_of_orders,
            total_amount=row.total_amount,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "productName": "Widget",
                "discountPercent": "15.00",
                "numberOfOrders": 3,
                "totalAmount": "2550.00"
            }
        }
