"""Stripe payment gateway adapter."""

from decimal import Decimal

import stripe

from storefront.payments.gateway.port import GatewayError, PaymentGateway, PaymentIntent
from storefront.shared.money import to_minor_units


class StripeGateway(PaymentGateway):
    def __init__(self, api_key: str) -> None:
        stripe.api_key = api_key

    def create_payment_intent(self, amount: Decimal, currency: str) -> PaymentIntent:
        try:
            intent = stripe.PaymentIntent.create(
                amount=to_minor_units(amount),
                currency=currency.lower(),
                automatic_payment_methods={"enabled": True},
            )
        except stripe.StripeError as exc:
            raise GatewayError(str(exc)) from exc
        return PaymentIntent(intent_id=intent.id, client_secret=intent.client_secret)
