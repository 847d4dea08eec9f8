"""Reporting use cases"""
from .discounted_products import DiscountedProductsReport
from .dtos import DiscountedProductReportItemDTO

__all__ = [
    "DiscountedProductsReport",
    "DiscountedProductReportItemDTO",
]
