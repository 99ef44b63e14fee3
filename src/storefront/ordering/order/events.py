"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """An order and its line items were persisted."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier()
    customer_email = String(required=True)
    customer_name = String(required=True)
    total = String(required=True)
    status = String(required=True)
    items = Text(required=True)  # JSON: list of item snapshots
    shipping_address = Text(required=True)  # JSON: address dict
    created_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    """An order moved to a different status."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_email = String(required=True)
    customer_name = String(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
