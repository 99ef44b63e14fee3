"""Pydantic request/response schemas for the Ordering API.

These are the external JSON contracts, kept separate from the internal
Protean commands.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from storefront.shared.schema import CamelModel


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class ShippingAddressSchema(CamelModel):
    line1: str = Field(..., min_length=1, max_length=255)
    line2: str | None = Field(None, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    postal_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)


class OrderItemSchema(CamelModel):
    product_id: str
    product_name: str = Field(..., min_length=1, max_length=255)
    product_price: str
    quantity: int = Field(..., ge=1)


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class OrderHeaderSchema(CamelModel):
    user_id: str | None = None
    customer_email: str = Field(..., min_length=3, max_length=254)
    customer_name: str = Field(..., min_length=1, max_length=255)
    shipping_address: ShippingAddressSchema
    total: str
    status: str | None = None
    payment_intent_id: str | None = None


class CreateOrderRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "order": {
                        "customerEmail": "asha@example.com",
                        "customerName": "Asha Rai",
                        "shippingAddress": {
                            "line1": "12 MG Road",
                            "city": "Bengaluru",
                            "state": "KA",
                            "postalCode": "560001",
                            "country": "IN",
                        },
                        "total": "244.98",
                        "status": "pending",
                    },
                    "items": [
                        {"productId": "prod-a", "productName": "Ring A", "productPrice": "89.99", "quantity": 2},
                        {"productId": "prod-b", "productName": "Earrings B", "productPrice": "65.00", "quantity": 1},
                    ],
                }
            ]
        }
    )

    order: OrderHeaderSchema
    items: list[OrderItemSchema]


class UpdateOrderStatusRequest(CamelModel):
    status: str


# ---------------------------------------------------------------------------
# Order Response Schemas
# ---------------------------------------------------------------------------
class OrderItemResponse(CamelModel):
    id: str
    order_id: str
    product_id: str
    product_name: str
    product_price: str
    quantity: int


class OrderResponse(CamelModel):
    id: str
    user_id: str | None = None
    customer_email: str
    customer_name: str
    shipping_address: ShippingAddressSchema
    total: str
    status: str
    payment_intent_id: str | None = None
    created_at: datetime | None = None
    items: list[OrderItemResponse]

    @classmethod
    def from_aggregate(cls, order) -> OrderResponse:
        address = order.shipping_address
        return cls(
            id=str(order.id),
            user_id=str(order.user_id) if order.user_id else None,
            customer_email=order.customer_email,
            customer_name=order.customer_name,
            shipping_address=ShippingAddressSchema(
                line1=address.line1,
                line2=address.line2,
                city=address.city,
                state=address.state,
                postal_code=address.postal_code,
                country=address.country,
            ),
            total=order.total,
            status=order.status,
            payment_intent_id=order.payment_intent_id,
            created_at=order.created_at,
            items=[
                OrderItemResponse(
                    id=str(item.id),
                    order_id=str(order.id),
                    product_id=str(item.product_id),
                    product_name=item.product_name,
                    product_price=item.product_price,
                    quantity=item.quantity,
                )
                for item in order.items
            ],
        )


# ---------------------------------------------------------------------------
# Cart Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(CamelModel):
    user_id: str | None = None
    session_id: str | None = None
    product_id: str
    quantity: int = Field(1, ge=1)


class UpdateCartQuantityRequest(CamelModel):
    quantity: int = Field(..., ge=1)


class CheckoutRequest(CamelModel):
    user_id: str | None = None
    session_id: str | None = None
    customer_email: str = Field(..., min_length=3, max_length=254)
    customer_name: str = Field(..., min_length=1, max_length=255)
    shipping_address: ShippingAddressSchema
    shipping_cost: str = "0"
    status: str | None = None
    payment_intent_id: str | None = None


class CartItemResponse(CamelModel):
    id: str
    user_id: str | None = None
    session_id: str | None = None
    product_id: str
    quantity: int
    created_at: datetime | None = None
    # Echoed from the catalogue; None once the product is gone
    product_name: str | None = None
    product_price: str | None = None
    product_image: str | None = None

    @classmethod
    def from_aggregate(cls, item, product=None) -> CartItemResponse:
        images = product.image_list if product is not None else []
        return cls(
            id=str(item.id),
            user_id=str(item.user_id) if item.user_id else None,
            session_id=item.session_id,
            product_id=str(item.product_id),
            quantity=item.quantity,
            created_at=item.created_at,
            product_name=product.name if product is not None else None,
            product_price=product.price if product is not None else None,
            product_image=images[0] if images else None,
        )
