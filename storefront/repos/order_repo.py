# storefront/repos/order_repo.py
from typing import List

from storefront.domain.schemas import Order, OrderStatus
from storefront.repos.record_store import RecordStore
from storefront.utils.settings import RECENT_ORDERS_LIMIT


class OrderRepo(RecordStore[Order]):
    model = Order
    entity_name = "Order"

    async def get_by_status(self, status: OrderStatus | str) -> List[Order]:
        status = OrderStatus(status)
        return await self.find(lambda o: o.status == status)

    async def update_status(self, order_id: int, status: OrderStatus | str) -> Order:
        # dowolne przejscie statusu, bez maszyny stanow
        return await self.update(order_id, {"status": OrderStatus(status)})

    async def get_recent(self, limit: int = RECENT_ORDERS_LIMIT) -> List[Order]:
        orders = await self.get_all()
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders[:limit]
