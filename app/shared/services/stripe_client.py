# app/shared/services/stripe_client.py
import httpx
import logging
from typing import Dict, Any, Optional
from app.config.settings import settings
from app.core.exceptions import PaymentProviderError

logger = logging.getLogger(__name__)

class StripeClient:
    """Cliente para la API REST de Stripe (payment intents)"""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.stripe_api_base
        self.api_key = settings.stripe_sk
        self.timeout = settings.stripe_timeout
        self.transport = transport

    def _get_headers(self) -> Dict[str, str]:
        """Headers para autenticación"""
        return {"Authorization": f"Bearer {self.api_key}"}

    async def create_payment_intent(self, amount: int, currency: str) -> Dict[str, Any]:
        """
        Crear payment intent por `amount` unidades menores de `currency`
        """
        data = {
            "amount": str(amount),
            "currency": currency,
            "payment_method_types[]": "card",
        }

        logger.info(f"💳 Creando payment intent - amount: {amount} {currency}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    f"{self.base_url}/payment_intents",
                    data=data,
                    headers=self._get_headers()
                )
        except httpx.HTTPError as e:
            raise PaymentProviderError(f"Error comunicándose con Stripe: {e}") from e

        if response.status_code != 200:
            raise PaymentProviderError(
                f"Error de Stripe: {response.status_code} - {response.text}",
                status_code=response.status_code
            )

        result = response.json()
        logger.info(f"✅ Payment intent creado: {result.get('id')}")
        return result
