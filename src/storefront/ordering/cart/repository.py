"""Cart lookups by owner."""

from protean.exceptions import ObjectNotFoundError

from storefront.domain import storefront
from storefront.ordering.cart.cart import CartItem


@storefront.repository(part_of=CartItem)
class CartItemRepository:
    def find(self, cart_item_id) -> CartItem | None:
        try:
            return self.get(cart_item_id)
        except ObjectNotFoundError:
            return None

    def for_owner(self, user_id=None, session_id=None) -> list[CartItem]:
        """Items for a user, or for a session when no user is given."""
        if user_id:
            items = self._dao.query.filter(user_id=user_id).all().items
        elif session_id:
            items = self._dao.query.filter(session_id=session_id).all().items
        else:
            return []
        return sorted(items, key=lambda i: i.created_at)

    def line_for(self, product_id, user_id=None, session_id=None) -> CartItem | None:
        for item in self.for_owner(user_id, session_id):
            if str(item.product_id) == str(product_id):
                return item
        return None

    def discard(self, item: CartItem) -> None:
        self._dao.delete(item)
