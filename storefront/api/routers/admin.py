# storefront/api/routers/admin.py
from fastapi import APIRouter, Depends

from storefront.api.deps import get_order_repo, get_product_repo
from storefront.domain.schemas import DashboardStats
from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.services.admin_service import AdminService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(
    products: ProductRepo = Depends(get_product_repo),
    orders: OrderRepo = Depends(get_order_repo),
):
    return await AdminService(products, orders).dashboard_stats()
