# app/modules/payments/service.py
from typing import Optional

from app.config.settings import settings
from app.shared.services.stripe_client import StripeClient
from .schemas import PaymentIntentResponse


def to_minor_units(amount: float) -> int:
    """Monto decimal a centavos, truncando"""
    return int(amount * 100)


class PaymentsService:
    def __init__(self, client: Optional[StripeClient] = None):
        self.client = client or StripeClient()

    async def create_payment_intent(self, amount: float) -> PaymentIntentResponse:
        intent = await self.client.create_payment_intent(
            amount=to_minor_units(amount),
            currency=settings.payment_currency
        )
        return PaymentIntentResponse(clientSecret=intent["client_secret"])
