"""Order status update template, sent when an order changes status."""

_HEADLINES = {
    "pending": "is awaiting processing",
    "pending_payment": "is awaiting payment",
    "confirmed": "has been confirmed",
    "shipped": "has shipped",
    "delivered": "has been delivered",
    "cancelled": "has been cancelled",
}


class StatusUpdateTemplate:
    name = "status_update"

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        status = context.get("new_status", "")
        headline = _HEADLINES.get(status, f"is now {status}")
        return {
            "subject": f"Your Rai Aura order #{order_id} {headline}",
            "body": (
                f"Dear {context.get('customer_name', 'there')},\n\n"
                f"Your order #{order_id} {headline}.\n\n"
                "Rai Aura"
            ),
            "html_body": None,
        }
