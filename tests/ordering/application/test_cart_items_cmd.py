"""Application tests for cart line commands."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain
from storefront.ordering.cart.cart import CartItem
from storefront.ordering.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity


def _process(command):
    return current_domain.process(command, asynchronous=False)


def _cart(user_id=None, session_id=None):
    return current_domain.repository_for(CartItem).for_owner(user_id, session_id)


class TestAddToCart:
    def test_add_for_session(self, make_product):
        ring = make_product("Ring A")
        item = _process(AddToCart(session_id="sess-1", product_id=ring.id, quantity=2))
        assert item.quantity == 2
        assert [i.id for i in _cart(session_id="sess-1")] == [item.id]

    def test_adding_again_increments(self, make_product):
        ring = make_product("Ring A")
        _process(AddToCart(user_id="user-1", product_id=ring.id))
        _process(AddToCart(user_id="user-1", product_id=ring.id, quantity=2))

        cart = _cart(user_id="user-1")
        assert len(cart) == 1
        assert cart[0].quantity == 3

    def test_carts_are_separate_per_owner(self, make_product):
        ring = make_product("Ring A")
        _process(AddToCart(user_id="user-1", product_id=ring.id))
        _process(AddToCart(session_id="sess-1", product_id=ring.id))

        assert len(_cart(user_id="user-1")) == 1
        assert len(_cart(session_id="sess-1")) == 1

    def test_user_takes_precedence_over_session(self, make_product):
        ring = make_product("Ring A")
        item = _process(AddToCart(user_id="user-1", session_id="sess-1", product_id=ring.id))
        assert item.user_id == "user-1"
        assert item.session_id is None

    def test_unknown_product_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _process(AddToCart(session_id="sess-1", product_id="ghost"))
        assert "product_id" in exc.value.messages
        assert _cart(session_id="sess-1") == []

    def test_owner_required(self, make_product):
        ring = make_product("Ring A")
        with pytest.raises(ValidationError):
            _process(AddToCart(product_id=ring.id))


class TestUpdateAndRemove:
    def test_update_quantity(self, make_product):
        ring = make_product("Ring A")
        item = _process(AddToCart(session_id="sess-1", product_id=ring.id))
        _process(UpdateCartQuantity(cart_item_id=item.id, quantity=4))
        assert _cart(session_id="sess-1")[0].quantity == 4

    def test_update_below_one_rejected(self, make_product):
        ring = make_product("Ring A")
        item = _process(AddToCart(session_id="sess-1", product_id=ring.id))
        with pytest.raises(ValidationError):
            _process(UpdateCartQuantity(cart_item_id=item.id, quantity=0))
        assert _cart(session_id="sess-1")[0].quantity == 1

    def test_update_unknown_item(self):
        with pytest.raises(ObjectNotFoundError):
            _process(UpdateCartQuantity(cart_item_id="missing", quantity=2))

    def test_remove(self, make_product):
        ring = make_product("Ring A")
        item = _process(AddToCart(session_id="sess-1", product_id=ring.id))
        _process(RemoveFromCart(cart_item_id=item.id))
        assert _cart(session_id="sess-1") == []


class TestClearCart:
    def test_clear_only_the_owner(self, make_product):
        ring = make_product("Ring A")
        earrings = make_product("Earrings B")
        _process(AddToCart(session_id="sess-1", product_id=ring.id))
        _process(AddToCart(session_id="sess-1", product_id=earrings.id))
        _process(AddToCart(session_id="sess-2", product_id=ring.id))

        _process(ClearCart(session_id="sess-1"))

        assert _cart(session_id="sess-1") == []
        assert len(_cart(session_id="sess-2")) == 1

    def test_clear_requires_owner(self):
        with pytest.raises(ValidationError):
            _process(ClearCart())
