"""Storefront domain: catalogue, cart, ordering and identity for Rai Aura.

All aggregates live in one domain so that order placement, stock reduction
and cart clearing commit together in a single unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
