# app/modules/payments/router.py
from fastapi import APIRouter, Depends

from app.shared.services.stripe_client import StripeClient
from .service import PaymentsService
from .schemas import PaymentIntentRequest, PaymentIntentResponse

router = APIRouter()

def get_stripe_client() -> StripeClient:
    return StripeClient()

@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    payment_data: PaymentIntentRequest,
    client: StripeClient = Depends(get_stripe_client)
):
    """
    Crear payment intent en Stripe

    El monto se convierte a centavos (truncado) y se devuelve el client secret.
    """
    service = PaymentsService(client)
    return await service.create_payment_intent(payment_data.amount)
