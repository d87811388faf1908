# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.api.deps import get_cart_key, get_cart_storage, get_order_repo
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import CheckoutIn, Order, OrderStatus, OrderStatusUpdate
from storefront.repos.order_repo import OrderRepo
from storefront.services.cart_service import CartService
from storefront.services.cart_storage import CartStorage
from storefront.services.order_service import OrderService
from storefront.utils.settings import RECENT_ORDERS_LIMIT

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(repo: OrderRepo = Depends(get_order_repo)):
    return OrderService(repo)


@router.post("/checkout", response_model=Order, status_code=201)
async def checkout(
    payload: CheckoutIn,
    key: str = Depends(get_cart_key),
    storage: CartStorage = Depends(get_cart_storage),
    svc: OrderService = Depends(get_service),
):
    """
    Tworzy zamówienie z koszyka klienta i zdejmuje zamówione pozycje z koszyka.
    """
    try:
        return await svc.checkout(CartService(storage, key), payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/", response_model=List[Order])
async def list_orders(
    status: OrderStatus | None = Query(None),
    repo: OrderRepo = Depends(get_order_repo),
):
    if status is None:
        return await repo.get_all()
    return await repo.get_by_status(status)


@router.get("/recent", response_model=List[Order])
async def recent_orders(
    limit: int = Query(RECENT_ORDERS_LIMIT, ge=1),
    repo: OrderRepo = Depends(get_order_repo),
):
    return await repo.get_recent(limit)


@router.get("/{order_id}", response_model=Order)
async def get_order(order_id: int, repo: OrderRepo = Depends(get_order_repo)):
    try:
        return await repo.get_by_id(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{order_id}/status", response_model=Order)
async def update_order_status(
    order_id: int,
    payload: OrderStatusUpdate,
    repo: OrderRepo = Depends(get_order_repo),
):
    try:
        return await repo.update_status(order_id, payload.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{order_id}", response_model=Order)
async def delete_order(order_id: int, repo: OrderRepo = Depends(get_order_repo)):
    try:
        return await repo.delete(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
