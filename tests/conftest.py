"""Shared pytest fixtures for the storefront tests."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.celery_worker import celery_app
from storefront.data.seed import seed_products
from storefront.domain.schemas import CartLine
from storefront.main import create_app
from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.services.cart_service import CartService
from storefront.services.cart_storage import InMemoryCartStorage

# notification tasks run in-process, no broker
celery_app.conf.task_always_eager = True

FAST_LATENCY_MS = (1, 3)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def product_repo():
    """Product store seeded with the default catalog (ids 1-6, id 5 inactive)."""
    return ProductRepo(seed_products(), latency_ms=FAST_LATENCY_MS)


@pytest.fixture
def order_repo():
    """Empty order store."""
    return OrderRepo(latency_ms=FAST_LATENCY_MS)


@pytest.fixture
def storage():
    return InMemoryCartStorage()


@pytest.fixture
def cart(storage):
    return CartService(storage)


@pytest.fixture
def make_line():
    """Build a cart line with sensible defaults."""

    def _make(product_id=1, unit_price="10.00", quantity=1, **overrides):
        fields = {
            "product_id": product_id,
            "name": f"Product {product_id}",
            "display_name": None,
            "unit_price": Decimal(unit_price),
            "image_ref": f"https://img.example.com/{product_id}.jpg",
            "quantity": quantity,
        }
        fields.update(overrides)
        return CartLine(**fields)

    return _make


@pytest.fixture
def client(product_repo, order_repo, storage):
    """HTTP client over an app wired to the test stores."""
    app = create_app(product_repo=product_repo, order_repo=order_repo, cart_storage=storage)
    with TestClient(app) as test_client:
        yield test_client
