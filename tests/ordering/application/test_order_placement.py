"""Application tests for PlaceOrder: validation, stock and atomicity."""

import json

import pytest
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain
from storefront.catalogue.product.management import DeleteProduct
from storefront.catalogue.product.product import Product
from storefront.errors import PersistenceError, dispatch
from storefront.ordering.order.order import Order
from storefront.ordering.order.placement import PlaceOrder


def _place(lines, address, total, **overrides):
    fields = {
        "customer_email": "asha@example.com",
        "customer_name": "Asha Rai",
        "shipping_address": json.dumps(address),
        "total": total,
        "items": json.dumps(lines),
    }
    fields.update(overrides)
    return current_domain.process(PlaceOrder(**fields), asynchronous=False)


def _stored_orders():
    return current_domain.repository_for(Order).all_orders()


class TestPlaceOrder:
    def test_two_line_cart(self, make_product, address, line):
        ring = make_product("Ring A", price="89.99")
        earrings = make_product("Earrings B", price="65.00")

        order = _place([line(ring, 2), line(earrings, 1)], address, "244.98")

        stored = current_domain.repository_for(Order).get(order.id)
        assert stored.total == "244.98"
        assert stored.status == "pending"
        assert len(stored.items) == 2
        assert sorted((i.product_name, i.quantity) for i in stored.items) == [("Earrings B", 1), ("Ring A", 2)]

    def test_total_with_shipping(self, make_product, address, line):
        ring = make_product("Ring A", price="89.99")
        order = _place([line(ring, 2)], address, "229.98")
        assert order.total == "229.98"

    def test_stock_is_reduced(self, make_product, address, line):
        ring = make_product("Ring A", stock=5)
        _place([line(ring, 2)], address, "179.98")
        assert current_domain.repository_for(Product).get(ring.id).stock == 3

    def test_identical_requests_create_distinct_orders(self, make_product, address, line):
        ring = make_product("Ring A")
        first = _place([line(ring)], address, "89.99")
        second = _place([line(ring)], address, "89.99")

        assert first.id != second.id
        assert len(_stored_orders()) == 2

    def test_user_id_recorded(self, make_product, address, line):
        ring = make_product("Ring A")
        order = _place([line(ring)], address, "89.99", user_id="user-1")
        assert current_domain.repository_for(Order).for_user("user-1")[0].id == order.id

    def test_price_snapshot_comes_from_request(self, make_product, address, line):
        ring = make_product("Ring A", price="89.99")
        order = _place([line(ring, price="79.99")], address, "79.99")
        assert order.items[0].product_price == "79.99"


class TestPlaceOrderRejections:
    def test_empty_items_writes_nothing(self, address):
        with pytest.raises(ValidationError) as exc:
            _place([], address, "0")
        assert "items" in exc.value.messages
        assert _stored_orders() == []

    def test_unknown_product(self, address):
        ghost = {"product_id": "ghost", "product_name": "Ghost Ring", "product_price": "10.00", "quantity": 1}
        with pytest.raises(ValidationError) as exc:
            _place([ghost], address, "10.00")
        assert "Product not found: Ghost Ring" in str(exc.value.messages)
        assert _stored_orders() == []

    def test_insufficient_stock_leaves_nothing_behind(self, make_product, address, line):
        ring = make_product("Ring A", stock=5)
        earrings = make_product("Earrings B", price="65.00", stock=1)

        with pytest.raises(ValidationError) as exc:
            _place([line(ring, 2), line(earrings, 3)], address, "374.98")

        assert "Available: 1, Requested: 3" in str(exc.value.messages)
        assert _stored_orders() == []
        assert current_domain.repository_for(Product).get(ring.id).stock == 5

    def test_repeated_lines_count_against_stock_together(self, make_product, address, line):
        ring = make_product("Ring A", stock=3)
        with pytest.raises(ValidationError):
            _place([line(ring, 2), line(ring, 2)], address, "359.96")
        assert current_domain.repository_for(Product).get(ring.id).stock == 3

    def test_total_below_subtotal(self, make_product, address, line):
        ring = make_product("Ring A")
        with pytest.raises(ValidationError):
            _place([line(ring, 2)], address, "100.00")
        assert _stored_orders() == []

    def test_malformed_items_json(self, address):
        with pytest.raises(ValidationError):
            _place([], address, "0", items="not json")


class TestOrderHistory:
    def test_deleting_a_product_keeps_order_items(self, make_product, address, line):
        ring = make_product("Ring A", price="89.99")
        order = _place([line(ring, 2)], address, "179.98")

        current_domain.process(DeleteProduct(product_id=ring.id), asynchronous=False)

        item = current_domain.repository_for(Order).get(order.id).items[0]
        assert item.product_id == str(ring.id)
        assert item.product_name == "Ring A"
        assert item.product_price == "89.99"
        assert item.quantity == 2

    def test_price_change_does_not_rewrite_history(self, make_product, address, line):
        from storefront.catalogue.product.management import UpdateProduct

        ring = make_product("Ring A", price="89.99")
        order = _place([line(ring)], address, "89.99")

        current_domain.process(UpdateProduct(product_id=ring.id, price="120.00"), asynchronous=False)

        stored = current_domain.repository_for(Order).get(order.id)
        assert stored.total == "89.99"
        assert stored.items[0].product_price == "89.99"

    def test_listing_is_newest_first(self, make_product, address, line):
        ring = make_product("Ring A")
        first = _place([line(ring)], address, "89.99")
        second = _place([line(ring)], address, "89.99")

        assert [o.id for o in _stored_orders()] == [second.id, first.id]

    def test_find_unknown_order(self):
        assert current_domain.repository_for(Order).find("no-such-order") is None


class TestPlacementAtomicity:
    def test_failed_order_write_rolls_back_stock(self, make_product, address, line, monkeypatch):
        ring = make_product("Ring A", stock=5)

        dao_cls = type(current_domain.repository_for(Order)._dao)
        create = dao_cls._create

        def failing_create(self, *args, **kwargs):
            if self.entity_cls is Order:
                raise RuntimeError("disk full")
            return create(self, *args, **kwargs)

        monkeypatch.setattr(dao_cls, "_create", failing_create)

        command = PlaceOrder(
            customer_email="asha@example.com",
            customer_name="Asha Rai",
            shipping_address=json.dumps(address),
            total="179.98",
            items=json.dumps([line(ring, 2)]),
        )
        with pytest.raises(PersistenceError):
            dispatch(command)

        monkeypatch.undo()
        assert current_domain.repository_for(Product).get(ring.id).stock == 5
        assert _stored_orders() == []
