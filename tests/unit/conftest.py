import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock unit of work with async commit/rollback"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_product_repo():
    return MagicMock()


@pytest.fixture
def mock_order_repo():
    return MagicMock()


@pytest.fixture
def mock_order_item_repo():
    return MagicMock()
