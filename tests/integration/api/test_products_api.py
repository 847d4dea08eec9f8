"""Integration tests for Product API endpoints"""

import pytest
from decimal import Decimal
from httpx import AsyncClient


async def create_product(client: AsyncClient, name: str, price: str, **extra):
    response = await client.post("/api/products", json={"name": name, "price": price, **extra})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
class TestProductsAPI:

    async def test_create_product(self, client: AsyncClient):
        response = await client.post("/api/products", json={"name": "Widget", "price": "9.99"})

        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["name"] == "Widget"
        assert Decimal(data["price"]) == Decimal("9.99")
        assert data["discountPercentage"] is None
        assert data["discountQuantityThreshold"] is None

    async def test_create_product_with_discount(self, client: AsyncClient):
        data = await create_product(
            client, "Widget", "100.00", discountPercentage="15", discountQuantityThreshold=10
        )

        assert Decimal(data["discountPercentage"]) == Decimal("15")
        assert data["discountQuantityThreshold"] == 10

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "", "price": "1.00"},
            {"name": "   ", "price": "1.00"},
            {"price": "1.00"},
            {"name": "Widget", "price": "-0.01"},
            {"name": "Widget"},
        ],
    )
    async def test_create_product_validation_error(self, client: AsyncClient, payload):
        response = await client.post("/api/products", json=payload)

        assert response.status_code == 400
        data = response.json()
        assert data["error"]["code"] == "VALIDATION_ERROR"
        assert data["error"]["details"]

    async def test_search_by_name_is_case_insensitive(self, client: AsyncClient):
        for name, price in [("Apple", "1.00"), ("Banana", "2.00"), ("Green Apple", "1.50"), ("Pineapple", "3.00")]:
            await create_product(client, name, price)

        for term in ("Apple", "apple", "APPLE"):
            response = await client.get("/api/products", params={"name": term})

            assert response.status_code == 200
            data = response.json()
            assert {p["name"] for p in data["items"]} == {"Apple", "Green Apple", "Pineapple"}
            assert data["totalCount"] == 3

    async def test_pagination(self, client: AsyncClient):
        for i in range(5):
            await create_product(client, f"Product {i}", "1.00")

        page1 = (await client.get("/api/products", params={"page": 1, "pageSize": 2})).json()
        page2 = (await client.get("/api/products", params={"page": 2, "pageSize": 2})).json()
        page3 = (await client.get("/api/products", params={"page": 3, "pageSize": 2})).json()

        assert page1["totalCount"] == page2["totalCount"] == page3["totalCount"] == 5
        assert page1["page"] == 1
        assert page1["pageSize"] == 2
        assert len(page1["items"]) == 2
        assert len(page3["items"]) == 1
        assert {p["id"] for p in page1["items"]}.isdisjoint({p["id"] for p in page2["items"]})

    @pytest.mark.parametrize(
        "params",
        [{"page": 0}, {"pageSize": 0}, {"pageSize": 101}, {"page": -3, "pageSize": 10}],
    )
    async def test_invalid_pagination(self, client: AsyncClient, params):
        response = await client.get("/api/products", params=params)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_apply_discount(self, client: AsyncClient):
        product = await create_product(client, "Widget", "100.00")

        response = await client.put(
            f"/api/products/{product['id']}/discount",
            json={"percentage": 15, "quantityThreshold": 10},
        )

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["discountPercentage"]) == Decimal("15")
        assert data["discountQuantityThreshold"] == 10

    async def test_apply_zero_discount_clears(self, client: AsyncClient):
        product = await create_product(
            client, "Widget", "100.00", discountPercentage="15", discountQuantityThreshold=10
        )

        response = await client.put(
            f"/api/products/{product['id']}/discount",
            json={"percentage": 0, "quantityThreshold": 0},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["discountPercentage"] is None
        assert data["discountQuantityThreshold"] is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"percentage": 101, "quantityThreshold": 1},
            {"percentage": -1, "quantityThreshold": 1},
            {"percentage": 10, "quantityThreshold": 0},
            {"percentage": 10, "quantityThreshold": -5},
        ],
    )
    async def test_apply_discount_invalid(self, client: AsyncClient, payload):
        product = await create_product(client, "Widget", "100.00")

        response = await client.put(f"/api/products/{product['id']}/discount", json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["code"] in ("VALIDATION_ERROR", "INVALID_DISCOUNT")

    async def test_apply_discount_unknown_product(self, client: AsyncClient):
        response = await client.put(
            "/api/products/99999/discount",
            json={"percentage": 10, "quantityThreshold": 2},
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"

    async def test_search_keeps_spaces_in_filter(self, client: AsyncClient):
        for name in ("Apple", "Green Apple", "Pineapple"):
            await create_product(client, name, "1.00")

        response = await client.get("/api/products", params={"name": " apple"})

        assert response.status_code == 200
        assert [p["name"] for p in response.json()["items"]] == ["Green Apple"]

    async def test_decimals_are_returned_as_strings(self, client: AsyncClient):
        data = await create_product(
            client, "Widget", "100", discountPercentage="15", discountQuantityThreshold=10
        )

        assert data["price"] == "100.00"
        assert data["discountPercentage"] == "15.00"

    @pytest.mark.parametrize("page", [2**31, 10**18])
    async def test_page_beyond_range_is_rejected(self, client: AsyncClient, page):
        response = await client.get("/api/products", params={"page": page, "pageSize": 100})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize("product_id", [10**20, -(10**20)])
    async def test_discount_for_out_of_range_id_is_rejected(self, client: AsyncClient, product_id):
        response = await client.put(
            f"/api/products/{product_id}/discount",
            json={"percentage": 10, "quantityThreshold": 2},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_discount_threshold_beyond_range_is_rejected(self, client: AsyncClient):
        product = await create_product(client, "Widget", "100.00")

        response = await client.put(
            f"/api/products/{product['id']}/discount",
            json={"percentage": 10, "quantityThreshold": 10**20},
        )

        assert response.status_code == 400
