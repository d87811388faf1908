# storefront/api/__init__.py
from storefront.api.routers import admin, cart, health, orders, products

ROUTERS = (
    health.router,
    products.router,
    cart.router,
    orders.router,
    admin.router,
)
