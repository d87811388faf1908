# storefront/main.py
from fastapi import FastAPI
import uvicorn

from storefront.api import ROUTERS
from storefront.data.seed import seed_products
from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.services.cart_storage import CartStorage, build_cart_storage
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(
    product_repo: ProductRepo | None = None,
    order_repo: OrderRepo | None = None,
    cart_storage: CartStorage | None = None,
) -> FastAPI:
    app = FastAPI(
        title="RL Apna Store",
        version="1.0.0",
    )

    # sklepy nalezace do tej instancji aplikacji, nie globalne
    app.state.product_repo = product_repo or ProductRepo(seed_products())
    app.state.order_repo = order_repo or OrderRepo()
    app.state.cart_storage = cart_storage or build_cart_storage()

    for router in ROUTERS:
        app.include_router(router)

    logger.info(
        f"Storefront ready: cart storage {type(app.state.cart_storage).__name__}, "
        f"store latency {app.state.product_repo.latency_ms} ms"
    )
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
