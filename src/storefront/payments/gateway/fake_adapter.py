"""Configurable fake payment gateway for development and testing.

Makes no external calls. It can be told to fail so tests can exercise the
unavailable-gateway path.
"""

from decimal import Decimal
from uuid import uuid4

from storefront.payments.gateway.port import GatewayError, PaymentGateway, PaymentIntent


class FakeGateway(PaymentGateway):
    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Gateway unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Gateway unavailable") -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_payment_intent(self, amount: Decimal, currency: str) -> PaymentIntent:
        self.calls.append({"method": "create_payment_intent", "amount": amount, "currency": currency})

        if not self.should_succeed:
            raise GatewayError(self.failure_reason)

        intent_id = f"pi_fake_{uuid4().hex[:16]}"
        return PaymentIntent(intent_id=intent_id, client_secret=f"{intent_id}_secret_{uuid4().hex[:8]}")
