"""Server-side checkout: turn an owner's cart into an order.

Each cart line is resolved against the live catalogue and its current name
and price are frozen into the order. The order, the stock reductions and the
emptied cart commit in the same unit of work.
"""

import json
from decimal import Decimal

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.ordering.cart.cart import CartItem, require_owner
from storefront.ordering.order.placement import place_order
from storefront.shared.money import format_amount, parse_amount


@storefront.command(part_of="CartItem")
class CheckoutCart:
    user_id = Identifier()
    session_id = String(max_length=255)
    customer_email = String(required=True, max_length=254)
    customer_name = String(required=True, max_length=255)
    shipping_address = Text(required=True)  # JSON: address dict
    shipping_cost = String(default="0", max_length=20)
    status = String(max_length=20)
    payment_intent_id = String(max_length=255)


def snapshot_lines(cart_items) -> list[dict]:
    """Freeze the live product name and price for each cart line."""
    repo = current_domain.repository_for(Product)
    lines = []
    for item in cart_items:
        product = repo.find(item.product_id)
        if product is None:
            raise ValidationError({"items": [f"Product not found: {item.product_id}"]})
        lines.append(
            {
                "product_id": str(product.id),
                "product_name": product.name,
                "product_price": product.price,
                "quantity": item.quantity,
            }
        )
    return lines


def cart_total(lines: list[dict], shipping_cost) -> str:
    subtotal = sum(
        (Decimal(line["product_price"]) * line["quantity"] for line in lines),
        Decimal("0"),
    )
    return format_amount(subtotal + parse_amount(shipping_cost or "0", "shipping_cost"))


@storefront.command_handler(part_of=CartItem)
class CheckoutCartHandler:
    @handle(CheckoutCart)
    def checkout(self, command):
        require_owner(command.user_id, command.session_id)
        repo = current_domain.repository_for(CartItem)
        cart_items = repo.for_owner(command.user_id, command.session_id)
        if not cart_items:
            raise ValidationError({"cart": ["Cart is empty"]})

        lines = snapshot_lines(cart_items)
        address = command.shipping_address
        if isinstance(address, str):
            try:
                address = json.loads(address)
            except json.JSONDecodeError:
                raise ValidationError({"shipping_address": ["Must be valid JSON"]}) from None

        order = place_order(
            customer_email=command.customer_email,
            customer_name=command.customer_name,
            shipping_address=address,
            total=cart_total(lines, command.shipping_cost),
            items_data=lines,
            user_id=command.user_id,
            status=command.status,
            payment_intent_id=command.payment_intent_id,
        )

        for item in cart_items:
            repo.discard(item)
        return order
