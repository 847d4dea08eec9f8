"""Shared Data Transfer Objects

Base model for camelCase wire format, decimal output and pagination
containers.
"""

from decimal import Decimal
from typing import Annotated, Generic, List, TypeVar
from pydantic import BaseModel, Field, PlainSerializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")

MAX_PAGE_SIZE = 100

# Ids and counts are 32-bit on the wire
MAX_INT = 2**31 - 1
MIN_INT = -(2**31)

CENT = Decimal("0.01")


def format_decimal(value: Decimal) -> str:
    """
    Render a decimal as a plain string with two places

    Extra places are kept (without trailing zeros) when the value is not
    a whole number of cents, so no precision is lost.
    """
    quantized = value.quantize(CENT)
    if quantized == value:
        return format(quantized, "f")
    return format(value.normalize(), "f")


# Decimals are sent as JSON strings, never floats
DecimalString = Annotated[Decimal, PlainSerializer(format_decimal, return_type=str, when_used="json")]


class CamelModel(BaseModel):
    """Serializes field names as camelCase, accepts either form on input"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PageQueryDTO(CamelModel):
    """
    Pagination input shared by listing use cases
    """

    page: int = Field(
        default=1,
        ge=1,
        le=MAX_INT,
        description="1-based page number"
    )

    page_size: int = Field(
        default=10,
        ge=1,
        le=MAX_PAGE_SIZE,
        description="Items per page (1..100)"
    )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


class PageDTO(CamelModel, Generic[T]):
    """
    One page of a listing plus the total number of matching rows
    """

    items: List[T] = Field(
        default_factory=list,
        description="Items on this page"
    )

    total_count: int = Field(
        ...,
        description="Total matching items before pagination"
    )

    page: int = Field(..., description="Requested page")

    page_size: int = Field(..., description="Requested page size")
