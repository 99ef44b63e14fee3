"""Order aggregate: the record of a completed checkout.

An Order is written together with its OrderItems in one unit of work and is
immutable afterwards except for ``status``. Item name and price are frozen at
placement time so later catalogue edits never rewrite past orders.

Status policy:
    Any status may move to any other, so returns and corrections can move an
    order backwards, with two exceptions:
    - SHIPPED/DELIVERED orders cannot go back to PENDING or PENDING_PAYMENT
    - CANCELLED orders cannot be SHIPPED or DELIVERED
"""

import json
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import (
    DateTime,
    HasMany,
    Identifier,
    Integer,
    String,
    ValueObject,
)

from storefront.domain import storefront
from storefront.shared.email import normalize_email
from storefront.shared.money import format_amount, is_amount, parse_amount


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    PENDING_PAYMENT = "pending_payment"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# Transitions refused regardless of how the order got where it is
_FORBIDDEN_TRANSITIONS = {
    OrderStatus.SHIPPED: {OrderStatus.PENDING, OrderStatus.PENDING_PAYMENT},
    OrderStatus.DELIVERED: {OrderStatus.PENDING, OrderStatus.PENDING_PAYMENT},
    OrderStatus.CANCELLED: {OrderStatus.SHIPPED, OrderStatus.DELIVERED},
}


def parse_status(value) -> OrderStatus:
    try:
        return OrderStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in OrderStatus)
        raise ValidationError({"status": [f"Invalid status {value!r}. Expected one of: {allowed}"]}) from None


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships, captured at checkout and never changed."""

    line1 = String(required=True, max_length=255)
    line2 = String(max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    """One product line of an order with its name and price snapshot.

    ``product_id`` is a weak reference; the product may since have been
    changed or deleted.
    """

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    product_price = String(required=True, max_length=20)
    quantity = Integer(required=True, min_value=1)

    @invariant.post
    def price_must_be_a_decimal_string(self):
        if self.product_price is not None and not is_amount(self.product_price):
            raise ValidationError({"product_price": [f"Invalid amount format: {self.product_price!r}"]})

    @property
    def line_total(self) -> Decimal:
        return Decimal(self.product_price) * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    user_id = Identifier()  # None for guest checkout
    customer_email = String(required=True, max_length=254)
    customer_name = String(required=True, max_length=255)
    shipping_address = ValueObject(ShippingAddress, required=True)
    total = String(required=True, max_length=20)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_intent_id = String(max_length=255)
    items = HasMany(OrderItem)
    created_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        customer_email,
        customer_name,
        shipping_address,
        total,
        items_data,
        user_id=None,
        status=None,
        payment_intent_id=None,
    ):
        """Build a new order with its line items.

        Args:
            customer_email: Contact address; stored lowercase.
            customer_name: Name the order is addressed to.
            shipping_address: Dict with line1, line2, city, state, postal_code, country.
            total: Decimal string; must cover the items' subtotal, the rest
                   being the shipping surcharge.
            items_data: Non-empty list of dicts with product_id, product_name,
                        product_price, quantity.
            user_id: Owning user, or None for a guest.
            status: Initial status, "pending" when not given.
            payment_intent_id: Set when a payment gateway was used.
        """
        from storefront.ordering.order.events import OrderPlaced

        if not items_data:
            raise ValidationError({"items": ["An order must contain at least one item"]})

        try:
            email = normalize_email(customer_email)
        except ValidationError:
            raise ValidationError({"customer_email": [f"Invalid email address: {customer_email!r}"]}) from None

        initial_status = parse_status(status or OrderStatus.PENDING.value)
        order_total = parse_amount(total, "total")

        items = [
            OrderItem(
                product_id=item.get("product_id"),
                product_name=item.get("product_name"),
                product_price=format_amount(parse_amount(item.get("product_price"), "product_price")),
                quantity=item.get("quantity"),
            )
            for item in items_data
        ]
        subtotal = sum((item.line_total for item in items), Decimal("0"))
        if order_total < subtotal:
            raise ValidationError(
                {"total": [f"Total {format_amount(order_total)} is less than the items subtotal {format_amount(subtotal)}"]}
            )

        address = shipping_address
        if isinstance(shipping_address, dict):
            address = ShippingAddress(**shipping_address)

        order = cls(
            user_id=user_id,
            customer_email=email,
            customer_name=customer_name,
            shipping_address=address,
            total=format_amount(order_total),
            status=initial_status.value,
            payment_intent_id=payment_intent_id,
            created_at=datetime.now(UTC),
        )
        order.add_items(items)

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                user_id=user_id,
                customer_email=email,
                customer_name=customer_name,
                total=order.total,
                status=order.status,
                items=json.dumps(
                    [
                        {
                            "product_id": str(i.product_id),
                            "product_name": i.product_name,
                            "product_price": i.product_price,
                            "quantity": i.quantity,
                        }
                        for i in items
                    ]
                ),
                shipping_address=json.dumps(address.to_dict()),
                created_at=order.created_at,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target: OrderStatus) -> None:
        current = OrderStatus(self.status)
        if target in _FORBIDDEN_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot change status from {current.value} to {target.value}"]})

    def change_status(self, new_status) -> bool:
        """Move the order to ``new_status``. Returns False when nothing changed."""
        from storefront.ordering.order.events import OrderStatusChanged

        target = parse_status(new_status)
        if target.value == self.status:
            return False

        self._assert_can_transition(target)
        previous = self.status
        self.status = target.value

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                customer_email=self.customer_email,
                customer_name=self.customer_name,
                previous_status=previous,
                new_status=target.value,
                changed_at=datetime.now(UTC),
            )
        )
        return True

    @property
    def subtotal(self) -> Decimal:
        return sum((item.line_total for item in self.items), Decimal("0"))
