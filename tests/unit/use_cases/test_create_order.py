"""Unit tests for CreateOrder use case

Tests cover:
- Empty / missing item list
- Batch validation of malformed items
- Unknown product IDs
- Successful creation and commit
- Rollback on store failure
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock

from src.app.use_cases.orders.create_order import CreateOrder
from src.app.use_cases.orders.dtos import CreateOrderCommandDTO, OrderItemCommandDTO
from src.domain.order import Order
from src.domain.product import Product


@pytest.fixture
def create_order_use_case(mock_uow, mock_order_repo, mock_product_repo):
    return CreateOrder(
        uow=mock_uow,
        order_repo=mock_order_repo,
        product_repo=mock_product_repo,
    )


def product(product_id):
    return Product(id=product_id, name=f"Product {product_id}", price=Decimal("1.00"))


def command(*items):
    return CreateOrderCommandDTO(
        items=[OrderItemCommandDTO(product_id=p, quantity=q) if p is not None or q is not None else None
               for p, q in items]
    )


async def fake_create(order, items):
    order.id = 42
    for index, item in enumerate(items, start=1):
        item.id = index
        item.order_id = order.id
    return order, items


@pytest.mark.asyncio
class TestCreateOrderValidation:

    @pytest.mark.parametrize("items", [None, []])
    async def test_rejects_missing_or_empty_items(
        self, create_order_use_case, mock_product_repo, mock_uow, items
    ):
        mock_product_repo.get_by_ids = AsyncMock()

        result = await create_order_use_case.execute(CreateOrderCommandDTO(items=items))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.details[0]["field"] == "items"
        mock_product_repo.get_by_ids.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_reports_every_invalid_item(self, create_order_use_case, mock_product_repo):
        mock_product_repo.get_by_ids = AsyncMock()
        cmd = CreateOrderCommandDTO(
            items=[
                OrderItemCommandDTO(product_id=0, quantity=1),
                OrderItemCommandDTO(product_id=1, quantity=2),
                OrderItemCommandDTO(product_id=2, quantity=0),
                None,
                OrderItemCommandDTO(),
            ]
        )

        result = await create_order_use_case.execute(cmd)

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        fields = [detail["field"] for detail in result.error.details]
        assert fields == [
            "items[0].productId",
            "items[2].quantity",
            "items[3]",
            "items[4].productId",
            "items[4].quantity",
        ]
        mock_product_repo.get_by_ids.assert_not_called()

    async def test_rejects_unknown_products_with_single_lookup(
        self, create_order_use_case, mock_product_repo, mock_order_repo, mock_uow
    ):
        mock_product_repo.get_by_ids = AsyncMock(return_value=[product(1)])
        mock_order_repo.create = AsyncMock()

        result = await create_order_use_case.execute(command((1, 1), (99, 2), (1, 3), (98, 1)))

        assert result.is_err()
        assert result.error.code == "PRODUCTS_NOT_FOUND"
        assert [detail["value"] for detail in result.error.details] == [98, 99]
        mock_product_repo.get_by_ids.assert_called_once()
        assert set(mock_product_repo.get_by_ids.call_args.args[0]) == {1, 98, 99}
        mock_order_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_negative_product_id_is_looked_up_not_rejected(
        self, create_order_use_case, mock_product_repo, mock_order_repo
    ):
        mock_product_repo.get_by_ids = AsyncMock(return_value=[])
        mock_order_repo.create = AsyncMock()

        result = await create_order_use_case.execute(command((-5, 1)))

        assert result.is_err()
        assert result.error.code == "PRODUCTS_NOT_FOUND"
        assert result.error.details[0]["value"] == -5
        mock_order_repo.create.assert_not_called()


@pytest.mark.asyncio
class TestCreateOrderSuccess:

    async def test_creates_order_with_all_items(
        self, create_order_use_case, mock_product_repo, mock_order_repo, mock_uow
    ):
        mock_product_repo.get_by_ids = AsyncMock(return_value=[product(1), product(2)])
        mock_order_repo.create = AsyncMock(side_effect=fake_create)

        result = await create_order_use_case.execute(command((1, 2), (2, 3)))

        assert result.is_ok()
        response = result.value
        assert response.id == 42
        assert [(i.product_id, i.quantity) for i in response.items] == [(1, 2), (2, 3)]

        order_arg, items_arg = mock_order_repo.create.call_args.args
        assert isinstance(order_arg, Order)
        assert len(items_arg) == 2
        mock_uow.commit.assert_called_once()

    async def test_duplicate_product_lines_are_kept(
        self, create_order_use_case, mock_product_repo, mock_order_repo
    ):
        mock_product_repo.get_by_ids = AsyncMock(return_value=[product(1)])
        mock_order_repo.create = AsyncMock(side_effect=fake_create)

        result = await create_order_use_case.execute(command((1, 2), (1, 5)))

        assert result.is_ok()
        assert len(result.value.items) == 2

    async def test_rolls_back_and_reraises_on_store_failure(
        self, create_order_use_case, mock_product_repo, mock_order_repo, mock_uow
    ):
        mock_product_repo.get_by_ids = AsyncMock(return_value=[product(1)])
        mock_order_repo.create = AsyncMock(side_effect=RuntimeError("database unavailable"))

        with pytest.raises(RuntimeError):
            await create_order_use_case.execute(command((1, 1)))

        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()
