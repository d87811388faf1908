# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.api.deps import get_product_repo
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import CategoryCount, Product, ProductCreate, ProductUpdate
from storefront.repos.product_repo import ProductRepo
from storefront.utils.settings import FEATURED_LIMIT

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/", response_model=List[Product])
async def list_products(repo: ProductRepo = Depends(get_product_repo)):
    return await repo.get_all()


@router.get("/featured", response_model=List[Product])
async def featured_products(
    limit: int = Query(FEATURED_LIMIT, ge=0),
    repo: ProductRepo = Depends(get_product_repo),
):
    return await repo.get_featured(limit)


@router.get("/categories", response_model=List[CategoryCount])
async def list_categories(repo: ProductRepo = Depends(get_product_repo)):
    return await repo.get_categories()


@router.get("/search", response_model=List[Product])
async def search_products(
    q: str = Query(..., min_length=1),
    repo: ProductRepo = Depends(get_product_repo),
):
    return await repo.search(q)


@router.get("/category/{category}", response_model=List[Product])
async def products_by_category(category: str, repo: ProductRepo = Depends(get_product_repo)):
    return await repo.get_by_category(category)


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: int, repo: ProductRepo = Depends(get_product_repo)):
    try:
        return await repo.get_by_id(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/", response_model=Product, status_code=201)
async def create_product(payload: ProductCreate, repo: ProductRepo = Depends(get_product_repo)):
    return await repo.create(payload)


@router.patch("/{product_id}", response_model=Product)
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    repo: ProductRepo = Depends(get_product_repo),
):
    try:
        return await repo.update(product_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{product_id}", response_model=Product)
async def delete_product(product_id: int, repo: ProductRepo = Depends(get_product_repo)):
    try:
        return await repo.delete(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
