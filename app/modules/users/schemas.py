# app/modules/users/schemas.py
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional

Role = Literal["User", "Rider", "Admin"]

class UserRegisterRequest(BaseModel):
    name: Optional[str] = Field(None, description="Nombre visible")
    photo: Optional[str] = Field(None, description="URL de la foto")
    role: Role = Field("User", description="Rol inicial")
    createdOn: Optional[str] = Field(None, description="Fecha de creación enviada por el cliente")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Rahim Uddin",
                "photo": "https://i.ibb.co/photo.png",
                "role": "User",
                "createdOn": "2026-10-19"
            }
        }

class TopRidersResponse(BaseModel):
    byRating: List[Dict[str, Any]]
    byDelivery: List[Dict[str, Any]]
