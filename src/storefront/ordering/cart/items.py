"""Cart line management: commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.ordering.cart.cart import CartItem, require_owner


@storefront.command(part_of="CartItem")
class AddToCart:
    user_id = Identifier()
    session_id = String(max_length=255)
    product_id = Identifier(required=True)
    quantity = Integer(default=1, min_value=1)


@storefront.command(part_of="CartItem")
class UpdateCartQuantity:
    cart_item_id = Identifier(required=True)
    quantity = Integer(required=True)


@storefront.command(part_of="CartItem")
class RemoveFromCart:
    cart_item_id = Identifier(required=True)


@storefront.command(part_of="CartItem")
class ClearCart:
    user_id = Identifier()
    session_id = String(max_length=255)


@storefront.command_handler(part_of=CartItem)
class ManageCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        require_owner(command.user_id, command.session_id)
        if current_domain.repository_for(Product).find(command.product_id) is None:
            raise ValidationError({"product_id": [f"Product not found: {command.product_id}"]})

        repo = current_domain.repository_for(CartItem)
        # A signed-in user's cart is keyed by user only
        session_id = None if command.user_id else command.session_id
        item = repo.line_for(command.product_id, command.user_id, session_id)
        if item is None:
            item = CartItem.create(
                product_id=command.product_id,
                quantity=command.quantity,
                user_id=command.user_id,
                session_id=session_id,
            )
        else:
            item.increase(command.quantity)
        repo.add(item)
        return item

    @handle(UpdateCartQuantity)
    def update_quantity(self, command):
        repo = current_domain.repository_for(CartItem)
        item = repo.get(command.cart_item_id)
        item.set_quantity(command.quantity)
        repo.add(item)
        return item

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(CartItem)
        repo.discard(repo.get(command.cart_item_id))

    @handle(ClearCart)
    def clear_cart(self, command):
        require_owner(command.user_id, command.session_id)
        repo = current_domain.repository_for(CartItem)
        for item in repo.for_owner(command.user_id, command.session_id):
            repo.discard(item)
