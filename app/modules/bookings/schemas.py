# app/modules/bookings/schemas.py
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Literal, Optional

BookingStatus = Literal["Pending", "Assigned", "On The Way", "Delivered", "Returned", "Cancelled"]

class BookingCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Nombre del remitente")
    email: EmailStr = Field(..., description="Email del remitente")
    phone: str = Field(..., description="Teléfono del remitente")
    type: str = Field(..., description="Tipo de paquete")
    weight: float = Field(..., ge=0, description="Peso en kg")
    receiverName: str
    receiverPhone: str
    deliveryAddress: str
    reqDeliveryDate: str = Field(..., description="Fecha solicitada (YYYY-MM-DD)")
    deliveryLat: float
    deliveryLon: float

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Rahim Uddin",
                "email": "rahim@niyejai.com",
                "phone": "01700000000",
                "type": "Document",
                "weight": "1.5",
                "receiverName": "Karim",
                "receiverPhone": "01800000000",
                "deliveryAddress": "House 12, Road 3, Dhanmondi",
                "reqDeliveryDate": "2026-10-25",
                "deliveryLat": "23.7465",
                "deliveryLon": "90.3760"
            }
        }
    )

class BookingUpdateRequest(BaseModel):
    """Solo estos campos pueden modificarse después de crear el envío"""
    model_config = ConfigDict(extra="forbid")

    status: Optional[BookingStatus] = None
    deliveryMen: Optional[str] = Field(None, description="ID del repartidor asignado")
    approxDeliveryDate: Optional[str] = Field(None, description="Fecha aproximada de entrega")

    @field_validator("status")
    @classmethod
    def status_not_null(cls, v):
        if v is None:
            raise ValueError("El estado no puede ser nulo")
        return v

    @field_validator("deliveryMen", "approxDeliveryDate")
    @classmethod
    def strip_value(cls, v):
        return v.strip() if isinstance(v, str) else v
