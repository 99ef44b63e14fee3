"""FastAPI endpoint for creating payment intents."""

import os

from fastapi import APIRouter
from protean.exceptions import ValidationError

from storefront.errors import PaymentUnavailableError
from storefront.payments.gateway import get_gateway
from storefront.payments.gateway.port import GatewayError
from storefront.shared.money import parse_amount
from storefront.shared.schema import CamelModel
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["payments"])


class PaymentIntentRequest(CamelModel):
    amount: str | int | float


class PaymentIntentResponse(CamelModel):
    client_secret: str
    payment_intent_id: str


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(body: PaymentIntentRequest) -> PaymentIntentResponse:
    raw = body.amount
    # JSON numbers such as 244.98 arrive as floats
    amount = parse_amount(repr(raw) if isinstance(raw, float) else raw)
    if amount <= 0:
        raise ValidationError({"amount": ["Amount must be greater than zero"]})

    currency = os.environ.get("PAYMENT_CURRENCY", "inr")
    try:
        intent = get_gateway().create_payment_intent(amount, currency)
    except GatewayError as exc:
        logger.error("payment_intent_failed", error=str(exc))
        raise PaymentUnavailableError(f"Error creating payment intent: {exc}") from exc

    logger.info("payment_intent_created", payment_intent_id=intent.intent_id)
    return PaymentIntentResponse(client_secret=intent.client_secret, payment_intent_id=intent.intent_id)
