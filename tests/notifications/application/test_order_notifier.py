"""Order emails sent from order events."""

import json

from protean.utils.globals import current_domain
from storefront.notifications.channel import set_email_channel
from storefront.notifications.channel.fake_email import FakeEmailAdapter
from storefront.ordering.order.order import Order
from storefront.ordering.order.placement import PlaceOrder
from storefront.ordering.order.status import UpdateOrderStatus

ADDRESS = {
    "line1": "12 MG Road",
    "city": "Bengaluru",
    "state": "KA",
    "postal_code": "560001",
    "country": "IN",
}


class RaisingEmailAdapter(FakeEmailAdapter):
    def send(self, to, subject, body, html_body=None):
        raise ConnectionError("mail server down")


def _place(product):
    items = [
        {
            "product_id": str(product.id),
            "product_name": product.name,
            "product_price": product.price,
            "quantity": 1,
        }
    ]
    return current_domain.process(
        PlaceOrder(
            customer_email="asha@example.com",
            customer_name="Asha Rai",
            shipping_address=json.dumps(ADDRESS),
            total=product.price,
            items=json.dumps(items),
        ),
        asynchronous=False,
    )


class TestOrderConfirmationEmail:
    def test_sent_on_placement(self, make_product, outbox):
        order = _place(make_product("Ring A"))

        messages = outbox.messages_to("asha@example.com")
        assert len(messages) == 1
        assert messages[0]["subject"] == f"Order Confirmed - #{order.id}"
        assert "1 x Ring A @ 89.99" in messages[0]["body"]

    def test_failed_delivery_keeps_the_order(self, make_product, outbox):
        outbox.fail_with("mailbox full")
        order = _place(make_product("Ring A"))

        assert outbox.outbox == []
        assert current_domain.repository_for(Order).get(order.id).total == "89.99"

    def test_raising_adapter_keeps_the_order(self, make_product):
        set_email_channel(RaisingEmailAdapter())
        order = _place(make_product("Ring A"))
        assert current_domain.repository_for(Order).get(order.id) is not None


class TestStatusEmail:
    def test_sent_on_change(self, make_product, outbox):
        order = _place(make_product("Ring A"))
        current_domain.process(UpdateOrderStatus(order_id=order.id, status="shipped"), asynchronous=False)

        subjects = [m["subject"] for m in outbox.messages_to("asha@example.com")]
        assert subjects[-1] == f"Your Rai Aura order #{order.id} has shipped"

    def test_not_sent_when_status_unchanged(self, make_product, outbox):
        order = _place(make_product("Ring A"))
        current_domain.process(UpdateOrderStatus(order_id=order.id, status="pending"), asynchronous=False)
        assert len(outbox.messages_to("asha@example.com")) == 1
