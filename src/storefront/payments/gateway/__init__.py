"""Payment gateway factory.

get_gateway() / set_gateway() swap implementations:
- FakeGateway for development and testing (default)
- StripeGateway when ``STRIPE_SECRET_KEY`` is set
"""

import os

from storefront.payments.gateway.fake_adapter import FakeGateway
from storefront.payments.gateway.port import PaymentGateway

_current_gateway: PaymentGateway | None = None


def get_gateway() -> PaymentGateway:
    global _current_gateway
    if _current_gateway is None:
        secret_key = os.environ.get("STRIPE_SECRET_KEY")
        if secret_key:
            from storefront.payments.gateway.stripe_adapter import StripeGateway

            _current_gateway = StripeGateway(api_key=secret_key)
        else:
            _current_gateway = FakeGateway()
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    """Override the active payment gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    global _current_gateway
    _current_gateway = None
