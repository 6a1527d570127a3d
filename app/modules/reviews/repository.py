# app/modules/reviews/repository.py
from pymongo import ReturnDocument
from pymongo.database import Database
from bson import ObjectId
from typing import List, Dict, Any, Optional

from app.config.database import REVIEWS, USERS

class ReviewsRepository:
    def __init__(self, db: Database):
        self.db = db
        self.collection = db[REVIEWS]

    def upsert_review(self, review_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Crear o reemplazar la reseña del envío; devuelve la reseña previa"""
        return self.collection.find_one_and_update(
            {"bookingId": review_data["bookingId"]},
            {"$set": review_data},
            upsert=True,
            return_document=ReturnDocument.BEFORE
        )

    def get_review_id(self, booking_id: str) -> Optional[ObjectId]:
        review = self.collection.find_one({"bookingId": booking_id}, {"_id": 1})
        return review["_id"] if review else None

    def get_reviews_by_rider(self, rider_id: str) -> List[Dict[str, Any]]:
        return list(self.collection.find({"deliveryMenId": rider_id}))

    def get_rider_rating_avg(self, rider_id: str) -> Optional[float]:
        """Promedio de calificaciones del repartidor"""
        result = list(self.collection.aggregate([
            {"$match": {"deliveryMenId": rider_id}},
            {"$group": {"_id": "$deliveryMenId", "avg": {"$avg": "$rating"}}},
        ]))
        return result[0]["avg"] if result else None

    def set_rider_rating(self, rider_id: ObjectId, rating_avg: float) -> None:
        self.db[USERS].update_one({"_id": rider_id}, {"$set": {"ratingAvg": rating_avg}})
