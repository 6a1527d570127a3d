# app/modules/reviews/router.py
from fastapi import APIRouter, Depends, Path
from pymongo.database import Database

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user
from app.shared.schemas.common import UpdateResponse
from .service import ReviewsService
from .schemas import ReviewUpsertRequest

router = APIRouter()

@router.patch("/reviews", response_model=UpdateResponse)
async def upsert_review(
    review_data: ReviewUpsertRequest,
    db: Database = Depends(get_db)
):
    """
    Crear o reemplazar la reseña de un envío

    - Una sola reseña por bookingId, la última escritura gana
    - reviewDate = fecha actual
    - Actualiza el promedio de calificación del repartidor
    """
    service = ReviewsService(db)
    return await service.upsert_review(review_data)

@router.get("/my-review/{id}")
async def get_my_reviews(
    id: str = Path(..., description="ID del repartidor"),
    current_user = Depends(get_current_user),
    db: Database = Depends(get_db)
):
    """Reseñas recibidas por un repartidor"""
    service = ReviewsService(db)
    return await service.get_reviews_by_rider(id)
