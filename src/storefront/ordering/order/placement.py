"""Order placement: command, handler and the routine shared with checkout.

Placement validates every product reference and stock level, freezes the
line items, reduces stock and persists the order. The command handler's unit
of work makes all of those writes land together or not at all.
"""

import json
from collections import Counter

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.ordering.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    """Place an order from a header and an explicit list of line items."""

    user_id = Identifier()
    customer_email = String(required=True, max_length=254)
    customer_name = String(required=True, max_length=255)
    shipping_address = Text(required=True)  # JSON: address dict
    total = String(required=True, max_length=20)
    status = String(max_length=20)
    payment_intent_id = String(max_length=255)
    items = Text(required=True)  # JSON: list of {product_id, product_name, product_price, quantity}


def _check_products(items) -> dict:
    """Resolve each line's product and verify there is enough stock.

    Quantities of repeated lines for the same product are added up before
    comparing against stock.
    """
    repo = current_domain.repository_for(Product)
    requested = Counter()
    products = {}

    for item in items:
        product_id = str(item.product_id)
        product = products.get(product_id) or repo.find(product_id)
        if product is None:
            raise ValidationError({"items": [f"Product not found: {item.product_name}"]})
        products[product_id] = product
        requested[product_id] += item.quantity

    for product_id, quantity in requested.items():
        product = products[product_id]
        if product.stock < quantity:
            raise ValidationError(
                {"items": [f"Insufficient stock for {product.name}. Available: {product.stock}, Requested: {quantity}"]}
            )

    return {pid: (products[pid], qty) for pid, qty in requested.items()}


def place_order(
    customer_email,
    customer_name,
    shipping_address: dict,
    total,
    items_data: list[dict],
    user_id=None,
    status=None,
    payment_intent_id=None,
) -> Order:
    """Validate, build and persist an order, reducing stock for each product.

    Must run inside a unit of work (a command handler) so that a failure in
    any write leaves neither the order nor any stock change behind.
    """
    if not items_data:
        raise ValidationError({"items": ["An order must contain at least one item"]})

    order = Order.place(
        customer_email=customer_email,
        customer_name=customer_name,
        shipping_address=shipping_address,
        total=total,
        items_data=items_data,
        user_id=user_id,
        status=status,
        payment_intent_id=payment_intent_id,
    )

    reservations = _check_products(order.items)

    product_repo = current_domain.repository_for(Product)
    for product, quantity in reservations.values():
        product.reduce_stock(quantity)
        product_repo.add(product)

    current_domain.repository_for(Order).add(order)

    logger.info(
        "order_placed",
        order_id=str(order.id),
        user_id=str(user_id) if user_id else None,
        total=order.total,
        item_count=len(order.items),
    )
    return order


def _load_json(raw, field):
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        raise ValidationError({field: ["Must be valid JSON"]}) from None


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        items_data = _load_json(command.items, "items")
        if not isinstance(items_data, list):
            raise ValidationError({"items": ["Items must be a list"]})

        return place_order(
            customer_email=command.customer_email,
            customer_name=command.customer_name,
            shipping_address=_load_json(command.shipping_address, "shipping_address"),
            total=command.total,
            items_data=items_data,
            user_id=command.user_id,
            status=command.status,
            payment_intent_id=command.payment_intent_id,
        )
