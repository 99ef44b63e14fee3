"""Payment gateway port.

Checkout only needs a payment intent: the browser confirms the card payment
directly with the provider using the returned client secret.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal


class GatewayError(Exception):
    """The provider rejected the request or could not be reached."""


@dataclass(frozen=True)
class PaymentIntent:
    intent_id: str
    client_secret: str


class PaymentGateway(ABC):
    @abstractmethod
    def create_payment_intent(self, amount: Decimal, currency: str) -> PaymentIntent:
        """Create an intent to collect ``amount`` (major units) in ``currency``.

        Raises:
            GatewayError: when the provider fails.
        """
        ...
