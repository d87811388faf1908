# storefront/services/order_service.py
from storefront.domain.schemas import CheckoutIn, Order, OrderCreate, OrderStatus
from storefront.repos.order_repo import OrderRepo
from storefront.services.cart_service import CartService
from storefront.services.notification_service import NotificationService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Checkout: z koszyka robimy zamowienie.
    Koszyk i sklep zamowien sa wstrzykiwane, serwis tylko je sklada.
    """

    def __init__(self, repo: OrderRepo, notification_service: NotificationService | None = None):
        self.repo = repo
        self.notification_service = notification_service or NotificationService()

    async def checkout(self, cart: CartService, payload: CheckoutIn) -> Order:
        """
        Use Case: zamówienie z bieżącego koszyka.

        1. Czyta snapshot koszyka (linie to kopie)
        2. Tworzy zamówienie ze statusem pending
        3. Zdejmuje zamówione pozycje z koszyka
        4. Wysyła powiadomienie (async)
        """
        items = cart.items
        if not items:
            raise ValueError("Cart is empty")

        order_data = OrderCreate(
            customer_name=payload.customer_name,
            customer_phone=payload.customer_phone,
            email=payload.email or None,
            delivery_address=payload.delivery_address,
            items=items,
            total_amount=cart.get_total_amount(),
            payment_method=payload.payment_method,
            status=OrderStatus.PENDING,
        )

        order = await self.repo.create(order_data)
        logger.info(f"Order {order.id} created from cart {cart.key} ({len(items)} lines)")

        # w trakcie create inny request mogl zmienic koszyk - czytamy go od nowa
        # i odejmujemy tylko to co weszlo do zamowienia
        cart.reload()
        cart.deduct(items)

        try:
            self.notification_service.send_order_notification(order)
        except Exception as e:
            # zamowienie juz istnieje, blad powiadomienia go nie cofa
            logger.warning(f"Failed to queue notification for order {order.id}: {e}")

        return order
