"""Product Repository Interface

Defines the contract for catalog persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple
from src.domain.product import Product


class ProductRepository(ABC):
    """
    Repository interface for Product persistence
    """

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """
        Create a new product

        Args:
            product: Product entity to persist

        Returns:
            Created Product with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """
        Retrieve product by ID

        Args:
            product_id: Product ID

        Returns:
            Product if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_ids(self, product_ids: Iterable[int]) -> List[Product]:
        """
        Retrieve all products whose ID is in product_ids with a single query

        Args:
            product_ids: Product IDs to look up

        Returns:
            Found products; missing IDs are simply absent
        """
        pass

    @abstractmethod
    async def list_paginated(
        self,
        name: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> Tuple[List[Product], int]:
        """
        List products ordered by ID

        Args:
            name: Optional case-insensitive substring filter on name
            limit: Maximum number of products to return
            offset: Number of matching products to skip

        Returns:
            Tuple of (page of products, total matching count)
        """
        pass

    @abstractmethod
    async def get_discounted(self) -> List[Product]:
        """
        Retrieve products with a positive discount percentage and a threshold

        Returns:
            Discounted products ordered by ID
        """
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """
        Update an existing product

        Args:
            product: Product entity with updated values

        Returns:
            Updated Product
        """
        pass
