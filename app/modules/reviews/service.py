# app/modules/reviews/service.py
import logging
from datetime import date
from typing import Any, Dict, List

from pymongo.database import Database

from .repository import ReviewsRepository
from .schemas import ReviewUpsertRequest
from app.shared.database.documents import serialize_many, try_object_id

logger = logging.getLogger(__name__)


class ReviewsService:
    def __init__(self, db: Database):
        self.db = db
        self.repository = ReviewsRepository(db)

    async def upsert_review(self, review_data: ReviewUpsertRequest) -> Dict[str, Any]:
        review = {
            "reviewBy": review_data.reviewBy.model_dump(),
            "rating": review_data.rating,
            "feedback": review_data.feedback,
            "deliveryMenId": review_data.deliveryMenId,
            "bookingId": review_data.bookingId,
            "reviewDate": date.today().isoformat(),
        }

        previous = self.repository.upsert_review(review)

        # Si la reseña cambió de repartidor, el anterior también se recalcula
        self._refresh_rider_rating(review_data.deliveryMenId)
        if previous is not None and previous.get("deliveryMenId") != review_data.deliveryMenId:
            self._refresh_rider_rating(previous.get("deliveryMenId"))

        if previous is None:
            upserted_id = self.repository.get_review_id(review_data.bookingId)
            return {
                "acknowledged": True,
                "matchedCount": 0,
                "modifiedCount": 0,
                "upsertedId": str(upserted_id) if upserted_id is not None else None,
            }

        modified = any(previous.get(key) != value for key, value in review.items())
        return {
            "acknowledged": True,
            "matchedCount": 1,
            "modifiedCount": 1 if modified else 0,
            "upsertedId": None,
        }

    def _refresh_rider_rating(self, rider_id: str) -> None:
        """Recalcular ratingAvg del repartidor con todas sus reseñas (0 si no tiene)"""
        rider_oid = try_object_id(rider_id)
        if rider_oid is None:
            return

        avg = self.repository.get_rider_rating_avg(rider_id)
        rating_avg = round(avg, 2) if avg is not None else 0

        self.repository.set_rider_rating(rider_oid, rating_avg)
        logger.info(f"⭐ ratingAvg de {rider_id} actualizado: {rating_avg}")

    async def get_reviews_by_rider(self, rider_id: str) -> List[Dict[str, Any]]:
        return serialize_many(self.repository.get_reviews_by_rider(rider_id))
