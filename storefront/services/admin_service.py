# storefront/services/admin_service.py
import asyncio
from decimal import Decimal

from storefront.domain.schemas import DashboardStats, OrderStatus
from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.settings import DASHBOARD_RECENT_ORDERS


class AdminService:
    def __init__(self, product_repo: ProductRepo, order_repo: OrderRepo):
        self.product_repo = product_repo
        self.order_repo = order_repo

    async def dashboard_stats(self, recent_limit: int = DASHBOARD_RECENT_ORDERS) -> DashboardStats:
        # odczyty rownolegle, kolejnosc zakonczenia dowolna
        products, orders, categories, recent = await asyncio.gather(
            self.product_repo.get_all(),
            self.order_repo.get_all(),
            self.product_repo.get_categories(),
            self.order_repo.get_recent(recent_limit),
        )

        return DashboardStats(
            total_products=len(products),
            active_products=sum(1 for p in products if p.is_active),
            total_orders=len(orders),
            pending_orders=sum(1 for o in orders if o.status == OrderStatus.PENDING),
            total_revenue=sum((o.total_amount for o in orders), Decimal("0.00")),
            total_categories=len(categories),
            recent_orders=recent,
        )
