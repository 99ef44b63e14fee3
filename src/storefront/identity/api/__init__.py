"""Identity HTTP API package."""

from storefront.identity.api.routes import router, wishlist_router

__all__ = ["router", "wishlist_router"]
