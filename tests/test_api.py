"""HTTP tests for the catalog, cart, checkout and admin routes."""

import asyncio
from decimal import Decimal

import httpx
import pytest

from storefront.main import create_app

SESSION = {"session_id": "shopper-1"}

CHECKOUT = {
    "customer_name": "Amit Verma",
    "customer_phone": "9123456780",
    "address": "4 Station Road",
    "city": "Jaipur",
    "pincode": "302001",
    "payment_method": "cod",
}


@pytest.fixture
def ghee(client):
    resp = client.post(
        "/products/",
        json={"name": "Desi Ghee 1L", "category": "Oil & Ghee", "price": "100", "stock": 10},
    )
    assert resp.status_code == 201
    return resp.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


class TestCatalog:
    def test_list_and_get(self, client):
        products = client.get("/products/").json()

        assert len(products) == 6
        assert client.get("/products/3").json()["name"] == "Toor Dal 1kg"

    def test_missing_product_is_404(self, client):
        assert client.get("/products/404").status_code == 404
        assert client.patch("/products/404", json={"name": "x"}).status_code == 404
        assert client.delete("/products/404").status_code == 404

    def test_featured_categories_search(self, client):
        featured = client.get("/products/featured", params={"limit": 2}).json()
        categories = client.get("/products/categories").json()
        found = client.get("/products/search", params={"q": "dal"}).json()
        pulses = client.get("/products/category/Pulses").json()

        assert [p["id"] for p in featured] == [1, 2]
        assert categories[0] == {"name": "Rice & Grains", "count": 1}
        assert [p["id"] for p in found] == [3, 6]
        assert [p["id"] for p in pulses] == [3, 6]

    def test_admin_product_lifecycle(self, client, ghee):
        assert ghee["id"] == 7
        assert ghee["updated_at"] is None

        updated = client.patch("/products/7", json={"price": "120", "is_active": False}).json()
        assert Decimal(updated["price"]) == Decimal("120")
        assert updated["name"] == "Desi Ghee 1L"
        assert updated["updated_at"] is not None

        assert client.delete("/products/7").json()["id"] == 7
        assert client.get("/products/7").status_code == 404

    def test_invalid_product_is_rejected(self, client):
        resp = client.post("/products/", json={"name": "Bad", "category": "X", "price": -1})

        assert resp.status_code == 422


class TestCart:
    def test_add_merges_by_product(self, client, ghee):
        client.post("/cart/items", params=SESSION, json={"product_id": ghee["id"], "quantity": 1})
        cart = client.post(
            "/cart/items", params=SESSION, json={"product_id": ghee["id"], "quantity": 2}
        ).json()

        assert len(cart["items"]) == 1
        assert cart["items"][0]["quantity"] == 3
        assert cart["total_items"] == 3
        assert Decimal(cart["total_amount"]) == Decimal("300")

    def test_cart_survives_between_requests(self, client):
        client.post("/cart/items", params=SESSION, json={"product_id": 1, "quantity": 2})

        cart = client.get("/cart/", params=SESSION).json()

        assert [(i["product_id"], i["quantity"]) for i in cart["items"]] == [(1, 2)]
        assert cart["items"][0]["display_name"] == "बासमती चावल 5 किलो"

    def test_sessions_have_separate_carts(self, client):
        client.post("/cart/items", params=SESSION, json={"product_id": 1})

        other = client.get("/cart/", params={"session_id": "shopper-2"}).json()

        assert other["items"] == []

    def test_unknown_or_inactive_product(self, client):
        missing = client.post("/cart/items", params=SESSION, json={"product_id": 404})
        inactive = client.post("/cart/items", params=SESSION, json={"product_id": 5})

        assert missing.status_code == 404
        assert inactive.status_code == 400

    def test_quantity_update_and_removal(self, client):
        client.post("/cart/items", params=SESSION, json={"product_id": 1})
        client.post("/cart/items", params=SESSION, json={"product_id": 2})

        cart = client.patch("/cart/items/1", params=SESSION, json={"quantity": 4}).json()
        assert cart["total_items"] == 5

        cart = client.patch("/cart/items/2", params=SESSION, json={"quantity": 0}).json()
        assert [i["product_id"] for i in cart["items"]] == [1]

        cart = client.delete("/cart/items/1", params=SESSION).json()
        assert cart["items"] == []

    def test_clear(self, client):
        client.post("/cart/items", params=SESSION, json={"product_id": 1})

        cart = client.delete("/cart/", params=SESSION).json()

        assert cart == {"items": [], "total_amount": "0.00", "total_items": 0}

    def test_session_is_required(self, client):
        assert client.get("/cart/").status_code == 422


class TestCheckout:
    def test_checkout_creates_pending_order_and_clears_cart(self, client, ghee):
        client.post("/cart/items", params=SESSION, json={"product_id": ghee["id"], "quantity": 3})

        resp = client.post("/orders/checkout", params=SESSION, json=CHECKOUT)

        assert resp.status_code == 201
        order = resp.json()
        assert order["id"] == 1
        assert order["status"] == "pending"
        assert order["delivery_address"] == "4 Station Road, Jaipur, 302001"
        assert Decimal(order["total_amount"]) == Decimal("300")
        assert [(i["product_id"], i["quantity"]) for i in order["items"]] == [(7, 3)]
        assert client.get("/cart/", params=SESSION).json()["items"] == []

    def test_empty_cart_is_400(self, client):
        resp = client.post("/orders/checkout", params=SESSION, json=CHECKOUT)

        assert resp.status_code == 400

    @pytest.mark.parametrize(
        "field, value",
        [("customer_phone", "12345"), ("pincode", "30200"), ("customer_name", "   "), ("city", "")],
    )
    def test_invalid_form_is_rejected(self, client, field, value):
        client.post("/cart/items", params=SESSION, json={"product_id": 1})

        resp = client.post("/orders/checkout", params=SESSION, json={**CHECKOUT, field: value})

        assert resp.status_code == 422
        assert len(client.get("/cart/", params=SESSION).json()["items"]) == 1


class TestOrdersAdmin:
    def _place_order(self, client, product_id=1, quantity=1):
        client.post("/cart/items", params=SESSION, json={"product_id": product_id, "quantity": quantity})
        return client.post("/orders/checkout", params=SESSION, json=CHECKOUT).json()

    def test_status_update_and_filter(self, client):
        first = self._place_order(client)
        second = self._place_order(client, product_id=2)

        resp = client.patch(f"/orders/{second['id']}/status", json={"status": "shipped"})
        assert resp.json()["status"] == "shipped"

        shipped = client.get("/orders/", params={"status": "shipped"}).json()
        assert [o["id"] for o in shipped] == [second["id"]]
        assert len(client.get("/orders/").json()) == 2
        assert client.get(f"/orders/{first['id']}").json()["status"] == "pending"

    def test_unknown_status_is_rejected(self, client):
        order = self._place_order(client)

        resp = client.patch(f"/orders/{order['id']}/status", json={"status": "lost"})

        assert resp.status_code == 422

    def test_missing_order_is_404(self, client):
        assert client.get("/orders/99").status_code == 404
        assert client.patch("/orders/99/status", json={"status": "confirmed"}).status_code == 404
        assert client.delete("/orders/99").status_code == 404

    def test_recent_and_stats(self, client):
        self._place_order(client, product_id=1, quantity=2)
        latest = self._place_order(client, product_id=3)

        recent = client.get("/orders/recent", params={"limit": 1}).json()
        stats = client.get("/admin/stats").json()

        assert [o["id"] for o in recent] == [latest["id"]]
        assert stats["total_orders"] == 2
        assert stats["pending_orders"] == 2
        assert Decimal(stats["total_revenue"]) == Decimal("549.00") * 2 + Decimal("165.00")
        assert stats["active_products"] == 5


class TestProductUpdateNulls:
    @pytest.mark.parametrize("field", ["name", "category", "price", "is_active"])
    def test_null_for_required_field_is_422(self, client, field):
        resp = client.patch("/products/1", json={field: None})

        assert resp.status_code == 422
        assert client.get("/products/1").json()["name"] == "Basmati Rice 5kg"

    def test_null_clears_optional_field(self, client):
        resp = client.patch("/products/1", json={"display_name": None, "stock": None})

        assert resp.status_code == 200
        assert resp.json()["display_name"] is None
        assert resp.json()["stock"] is None


@pytest.fixture
def async_client(product_repo, order_repo, storage):
    """Async HTTP client, requests share one event loop and can overlap."""
    app = create_app(product_repo=product_repo, order_repo=order_repo, cart_storage=storage)
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


@pytest.mark.anyio
class TestOverlappingRequests:
    async def test_parallel_adds_keep_both_products(self, async_client):
        async with async_client as ac:
            await asyncio.gather(
                ac.post("/cart/items", params=SESSION, json={"product_id": 1}),
                ac.post("/cart/items", params=SESSION, json={"product_id": 2}),
            )
            cart = (await ac.get("/cart/", params=SESSION)).json()

        assert sorted(i["product_id"] for i in cart["items"]) == [1, 2]

    async def test_parallel_adds_of_same_product_merge(self, async_client):
        async with async_client as ac:
            await asyncio.gather(
                *(ac.post("/cart/items", params=SESSION, json={"product_id": 3}) for _ in range(3))
            )
            cart = (await ac.get("/cart/", params=SESSION)).json()

        assert [(i["product_id"], i["quantity"]) for i in cart["items"]] == [(3, 3)]

    async def test_add_during_checkout_is_kept(self, async_client):
        async with async_client as ac:
            await ac.post("/cart/items", params=SESSION, json={"product_id": 1})
            checkout, _ = await asyncio.gather(
                ac.post("/orders/checkout", params=SESSION, json=CHECKOUT),
                ac.post("/cart/items", params=SESSION, json={"product_id": 2}),
            )
            cart = (await ac.get("/cart/", params=SESSION)).json()

        ordered = [i["product_id"] for i in checkout.json()["items"]]
        in_cart = [i["product_id"] for i in cart["items"]]
        # product 2 ends up in exactly one of them
        assert 1 in ordered
        assert 1 not in in_cart
        assert (2 in ordered) != (2 in in_cart)
