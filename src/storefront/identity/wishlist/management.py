"""Wishlist management: commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.wishlist.wishlist import WishlistItem


@storefront.command(part_of="WishlistItem")
class AddToWishlist:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@storefront.command(part_of="WishlistItem")
class RemoveFromWishlist:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=WishlistItem)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        repo = current_domain.repository_for(WishlistItem)
        existing = repo.entry(command.user_id, command.product_id)
        if existing is not None:
            return existing

        item = WishlistItem(user_id=command.user_id, product_id=command.product_id)
        repo.add(item)
        return item

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(WishlistItem)
        item = repo.entry(command.user_id, command.product_id)
        if item is not None:
            repo.discard(item)
