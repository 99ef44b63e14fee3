"""Wishlist entry aggregate: one saved product per user."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier

from storefront.domain import storefront


@storefront.aggregate
class WishlistItem:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
    created_at: DateTime(default=lambda: datetime.now(UTC))
