# app/modules/stats/schemas.py
from pydantic import BaseModel, Field

class CounterResponse(BaseModel):
    bookingCount: int = Field(..., description="Total estimado de envíos")
    deliveryCount: int = Field(..., description="Envíos entregados")
    userCount: int = Field(..., description="Usuarios con rol User")
