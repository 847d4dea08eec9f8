"""Product catalog use cases"""
from .create_product import CreateProduct
from .list_products import ListProducts
from .apply_discount import ApplyDiscount
from .dtos import (
    CreateProductCommandDTO,
    ApplyDiscountCommandDTO,
    ProductResponseDTO,
)

__all__ = [
    "CreateProduct",
    "ListProducts",
    "ApplyDiscount",
    "CreateProductCommandDTO",
    "ApplyDiscountCommandDTO",
    "ProductResponseDTO",
]
