# storefront/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_cart_key, get_cart_storage, get_product_repo
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import CartItemIn, CartOut, CartQuantityIn
from storefront.repos.product_repo import ProductRepo
from storefront.services.cart_service import CartService, line_from_product
from storefront.services.cart_storage import CartStorage

router = APIRouter(prefix="/cart", tags=["cart"])

# route sa async: load, zmiana i zapis koszyka ida w jednym kroku petli zdarzen


@router.get("/", response_model=CartOut)
async def get_cart_contents(
    key: str = Depends(get_cart_key),
    storage: CartStorage = Depends(get_cart_storage),
):
    return CartService(storage, key).snapshot()


@router.post("/items", response_model=CartOut)
async def add_item(
    payload: CartItemIn,
    key: str = Depends(get_cart_key),
    storage: CartStorage = Depends(get_cart_storage),
    products: ProductRepo = Depends(get_product_repo),
):
    # nazwa i cena z katalogu
    try:
        product = await products.get_by_id(payload.product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if not product.is_active:
        raise HTTPException(status_code=400, detail=f"Product {product.id} is not available")

    # koszyk ladowany dopiero po odczycie produktu, inaczej nadpisalibysmy rownolegle zmiany
    cart = CartService(storage, key)
    cart.add_to_cart(line_from_product(product, payload.quantity))
    return cart.snapshot()


@router.patch("/items/{product_id}", response_model=CartOut)
async def update_item(
    product_id: int,
    payload: CartQuantityIn,
    key: str = Depends(get_cart_key),
    storage: CartStorage = Depends(get_cart_storage),
):
    cart = CartService(storage, key)
    cart.update_quantity(product_id, payload.quantity)
    return cart.snapshot()


@router.delete("/items/{product_id}", response_model=CartOut)
async def remove_item(
    product_id: int,
    key: str = Depends(get_cart_key),
    storage: CartStorage = Depends(get_cart_storage),
):
    cart = CartService(storage, key)
    cart.remove_from_cart(product_id)
    return cart.snapshot()


@router.delete("/", response_model=CartOut)
async def clear_cart(
    key: str = Depends(get_cart_key),
    storage: CartStorage = Depends(get_cart_storage),
):
    cart = CartService(storage, key)
    cart.clear_cart()
    return cart.snapshot()
