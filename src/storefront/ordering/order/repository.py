"""Order queries: single lookup and newest-first listings."""

from protean.exceptions import ObjectNotFoundError

from storefront.domain import storefront
from storefront.ordering.order.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def find(self, order_id) -> Order | None:
        """Return the order, or None when the id does not resolve."""
        try:
            return self.get(order_id)
        except ObjectNotFoundError:
            return None

    def for_user(self, user_id) -> list[Order]:
        orders = self._dao.query.filter(user_id=user_id).all().items
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def all_orders(self) -> list[Order]:
        orders = self._dao.query.all().items
        return sorted(orders, key=lambda o: o.created_at, reverse=True)
