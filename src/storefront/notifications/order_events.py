"""Order notifications: email the customer when an order is placed or changes status.

Delivery is best-effort. A failed or raising adapter is logged and never
propagates back into order placement or status updates.
"""

import json

import structlog
from protean.utils.mixins import handle

from storefront.domain import storefront
from storefront.notifications.channel import get_email_channel
from storefront.notifications.templates import get_template
from storefront.ordering.order.events import OrderPlaced, OrderStatusChanged
from storefront.ordering.order.order import Order

logger = structlog.get_logger(__name__)


def deliver(to: str, template_name: str, context: dict) -> dict | None:
    """Render and send one email; returns the adapter result or None on error."""
    try:
        content = get_template(template_name).render(context)
        result = get_email_channel().send(
            to=to,
            subject=content["subject"],
            body=content["body"],
            html_body=content.get("html_body"),
        )
    except Exception as exc:
        logger.error(
            "notification_error",
            template=template_name,
            order_id=context.get("order_id"),
            error=str(exc),
        )
        return None

    if result.get("status") == "sent":
        logger.info("notification_sent", template=template_name, order_id=context.get("order_id"))
    else:
        logger.warning(
            "notification_failed",
            template=template_name,
            order_id=context.get("order_id"),
            error=result.get("error"),
        )
    return result


@storefront.event_handler(part_of=Order)
class OrderNotifier:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        deliver(
            event.customer_email,
            "order_confirmation",
            {
                "order_id": str(event.order_id),
                "customer_name": event.customer_name,
                "total": event.total,
                "items": json.loads(event.items),
                "shipping_address": json.loads(event.shipping_address),
            },
        )

    @handle(OrderStatusChanged)
    def on_status_changed(self, event: OrderStatusChanged) -> None:
        deliver(
            event.customer_email,
            "status_update",
            {
                "order_id": str(event.order_id),
                "customer_name": event.customer_name,
                "previous_status": event.previous_status,
                "new_status": event.new_status,
            },
        )
