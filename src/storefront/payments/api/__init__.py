"""Payments HTTP API package."""

from storefront.payments.api.routes import router

__all__ = ["router"]
