# app/modules/payments/schemas.py
from pydantic import BaseModel, Field

class PaymentIntentRequest(BaseModel):
    amount: float = Field(..., gt=0, description="Monto en moneda principal (ej. 150.00)")

class PaymentIntentResponse(BaseModel):
    clientSecret: str
