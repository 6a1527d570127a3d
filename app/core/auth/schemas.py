from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class TokenRequest(BaseModel):
    """Payload de identidad enviado por el cliente"""
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "email": "cliente@niyejai.com",
                "name": "Cliente Demo"
            }
        }
    )

    email: Optional[str] = Field(None, description="Email del usuario")

class TokenResponse(BaseModel):
    """Schema para respuesta de token"""
    token: str

    class Config:
        json_schema_extra = {
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."
            }
        }
