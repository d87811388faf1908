# storefront/services/notification_service.py
from decimal import Decimal

from storefront.celery_worker import celery_app
from storefront.domain.schemas import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Powiadomienia o zamowieniach.
    Celery robi wysylke asynchronicznie.
    """

    @staticmethod
    def send_order_notification(order: Order):
        """Wysyła klientowi powiadomienie o złożeniu zamówienia."""
        send_order_notification_task.delay(
            order.id,
            order.customer_name,
            order.customer_phone,
            str(order.total_amount),
        )


@celery_app.task(name="storefront.services.notification_service.send_order_notification_task")
def send_order_notification_task(order_id: int, customer_name: str, customer_phone: str, total_amount: str):
    """
    Celery task - w prawdziwym systemie wysłałby SMS/email.
    Teraz tylko loguje.
    """
    logger.info(
        f"[NOTIFICATION] {customer_name} ({customer_phone}): "
        f"order {order_id} placed, total {Decimal(total_amount)}"
    )
    return {"order_id": order_id, "status": "sent"}
