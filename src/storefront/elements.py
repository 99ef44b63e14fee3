"""Imports every module that declares storefront domain elements.

``Domain.init()`` traverses only this package and its immediate
subpackages, so aggregates, repositories, events and handlers nested one
level deeper are registered here. Import this module before calling
``storefront.init()``.
"""

# ruff: noqa: F401
import storefront.catalogue.category.category
import storefront.catalogue.category.events
import storefront.catalogue.category.management
import storefront.catalogue.category.repository
import storefront.catalogue.product.events
import storefront.catalogue.product.management
import storefront.catalogue.product.product
import storefront.catalogue.product.repository
import storefront.identity.user.events
import storefront.identity.user.registration
import storefront.identity.user.repository
import storefront.identity.user.user
import storefront.identity.wishlist.management
import storefront.identity.wishlist.repository
import storefront.identity.wishlist.wishlist
import storefront.notifications.order_events
import storefront.ordering.cart.cart
import storefront.ordering.cart.checkout
import storefront.ordering.cart.items
import storefront.ordering.cart.repository
import storefront.ordering.order.events
import storefront.ordering.order.order
import storefront.ordering.order.placement
import storefront.ordering.order.repository
import storefront.ordering.order.status
