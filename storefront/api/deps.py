# storefront/api/deps.py
from fastapi import Query, Request

from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.services.cart_storage import CartStorage
from storefront.utils.settings import CART_STORAGE_KEY


def get_product_repo(request: Request) -> ProductRepo:
    return request.app.state.product_repo


def get_order_repo(request: Request) -> OrderRepo:
    return request.app.state.order_repo


def get_cart_storage(request: Request) -> CartStorage:
    return request.app.state.cart_storage


def cart_key(session_id: str) -> str:
    return f"{CART_STORAGE_KEY}:{session_id}"


def get_cart_key(session_id: str = Query(..., min_length=1, max_length=64)) -> str:
    # CartService budujemy w ciele route, zaraz przed zmiana, bez await pomiedzy
    return cart_key(session_id)
