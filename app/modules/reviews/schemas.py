# app/modules/reviews/schemas.py
from pydantic import BaseModel, Field
from typing import Optional

class ReviewAuthor(BaseModel):
    name: Optional[str] = None
    photo: Optional[str] = None

class ReviewUpsertRequest(BaseModel):
    bookingId: str = Field(..., min_length=1, description="ID del envío reseñado")
    reviewBy: ReviewAuthor = Field(default_factory=ReviewAuthor)
    rating: float = Field(..., ge=1, le=5, description="Calificación de 1 a 5")
    feedback: Optional[str] = Field(None, max_length=1000)
    deliveryMenId: str = Field(..., min_length=1, description="ID del repartidor")

    class Config:
        json_schema_extra = {
            "example": {
                "bookingId": "6710f2c9a1b2c3d4e5f60718",
                "reviewBy": {"name": "Rahim Uddin", "photo": "https://i.ibb.co/photo.png"},
                "rating": 5,
                "feedback": "Entrega rápida",
                "deliveryMenId": "6710f2c9a1b2c3d4e5f60001"
            }
        }
