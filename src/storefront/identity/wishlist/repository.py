"""Wishlist lookups."""

from storefront.domain import storefront
from storefront.identity.wishlist.wishlist import WishlistItem


@storefront.repository(part_of=WishlistItem)
class WishlistItemRepository:
    def for_user(self, user_id) -> list[WishlistItem]:
        items = self._dao.query.filter(user_id=user_id).all().items
        return sorted(items, key=lambda i: i.created_at)

    def entry(self, user_id, product_id) -> WishlistItem | None:
        for item in self.for_user(user_id):
            if str(item.product_id) == str(product_id):
                return item
        return None

    def discard(self, item: WishlistItem) -> None:
        self._dao.delete(item)
