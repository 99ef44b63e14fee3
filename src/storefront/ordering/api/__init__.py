"""Ordering HTTP API package."""

from storefront.ordering.api.routes import cart_router, order_router

__all__ = ["order_router", "cart_router"]
