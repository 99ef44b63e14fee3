"""FastAPI endpoints for orders and carts."""

import json

from fastapi import APIRouter, Depends, Query, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.errors import dispatch
from storefront.identity.security import optional_user_id
from storefront.ordering.api.schemas import (
    AddToCartRequest,
    CartItemResponse,
    CheckoutRequest,
    CreateOrderRequest,
    OrderResponse,
    UpdateCartQuantityRequest,
    UpdateOrderStatusRequest,
)
from storefront.ordering.cart.cart import CartItem
from storefront.ordering.cart.checkout import CheckoutCart
from storefront.ordering.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity
from storefront.ordering.order.order import Order
from storefront.ordering.order.placement import PlaceOrder
from storefront.ordering.order.status import UpdateOrderStatus

order_router = APIRouter(prefix="/api/orders", tags=["orders"])
cart_router = APIRouter(prefix="/api/cart", tags=["cart"])


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@order_router.get("", response_model=list[OrderResponse])
async def list_orders(user_id: str | None = Query(None, alias="userId")) -> list[OrderResponse]:
    repo = current_domain.repository_for(Order)
    orders = repo.for_user(user_id) if user_id else repo.all_orders()
    return [OrderResponse.from_aggregate(o) for o in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    order = current_domain.repository_for(Order).find(order_id)
    if order is None:
        raise ObjectNotFoundError("Order not found")
    return OrderResponse.from_aggregate(order)


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(
    body: CreateOrderRequest,
    token_user_id: str | None = Depends(optional_user_id),
) -> OrderResponse:
    header = body.order
    command = PlaceOrder(
        user_id=header.user_id or token_user_id,
        customer_email=header.customer_email,
        customer_name=header.customer_name,
        shipping_address=json.dumps(header.shipping_address.model_dump()),
        total=header.total,
        status=header.status,
        payment_intent_id=header.payment_intent_id,
        items=json.dumps([item.model_dump() for item in body.items]),
    )
    return OrderResponse.from_aggregate(dispatch(command))


@order_router.put("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> OrderResponse:
    order = dispatch(UpdateOrderStatus(order_id=order_id, status=body.status))
    return OrderResponse.from_aggregate(order)


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
def _with_product(item: CartItem) -> CartItemResponse:
    product = current_domain.repository_for(Product).find(item.product_id)
    return CartItemResponse.from_aggregate(item, product)


@cart_router.get("", response_model=list[CartItemResponse])
async def list_cart(
    user_id: str | None = Query(None, alias="userId"),
    session_id: str | None = Query(None, alias="sessionId"),
) -> list[CartItemResponse]:
    items = current_domain.repository_for(CartItem).for_owner(user_id, session_id)
    return [_with_product(item) for item in items]


@cart_router.post("", response_model=CartItemResponse)
async def add_to_cart(body: AddToCartRequest) -> CartItemResponse:
    command = AddToCart(
        user_id=body.user_id,
        session_id=body.session_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    return _with_product(dispatch(command))


@cart_router.post("/checkout", status_code=201, response_model=OrderResponse)
async def checkout(
    body: CheckoutRequest,
    token_user_id: str | None = Depends(optional_user_id),
) -> OrderResponse:
    user_id = body.user_id or (token_user_id if not body.session_id else None)
    command = CheckoutCart(
        user_id=user_id,
        session_id=None if user_id else body.session_id,
        customer_email=body.customer_email,
        customer_name=body.customer_name,
        shipping_address=json.dumps(body.shipping_address.model_dump()),
        shipping_cost=body.shipping_cost,
        status=body.status,
        payment_intent_id=body.payment_intent_id,
    )
    return OrderResponse.from_aggregate(dispatch(command))


@cart_router.put("/{cart_item_id}", response_model=CartItemResponse)
async def update_cart_quantity(cart_item_id: str, body: UpdateCartQuantityRequest) -> CartItemResponse:
    item = dispatch(UpdateCartQuantity(cart_item_id=cart_item_id, quantity=body.quantity))
    return _with_product(item)


@cart_router.delete("/{cart_item_id}", status_code=204)
async def remove_from_cart(cart_item_id: str) -> Response:
    dispatch(RemoveFromCart(cart_item_id=cart_item_id))
    return Response(status_code=204)


@cart_router.delete("", status_code=204)
async def clear_cart(
    user_id: str | None = Query(None, alias="userId"),
    session_id: str | None = Query(None, alias="sessionId"),
) -> Response:
    dispatch(ClearCart(user_id=user_id, session_id=session_id))
    return Response(status_code=204)
