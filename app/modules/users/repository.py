# app/modules/users/repository.py
from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult
from bson import ObjectId
from typing import List, Dict, Any, Optional

from app.config.database import USERS

RIDER_PROJECTION = {"name": 1, "photo": 1, "ratingAvg": 1, "deliveryCount": 1}

class UsersRepository:
    def __init__(self, db: Database):
        self.db = db
        self.collection = db[USERS]

    def create_user(self, user_data: Dict[str, Any]) -> InsertOneResult:
        """Insertar usuario; el índice único de email rechaza duplicados"""
        return self.collection.insert_one(user_data)

    def get_users(self, role: Optional[str] = None) -> List[Dict[str, Any]]:
        query = {"role": role} if role else {}
        return list(self.collection.find(query))

    def get_user_role(self, email: str) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"email": email}, {"role": 1})

    def update_role(self, email: str, role: str) -> UpdateResult:
        return self.collection.update_one({"email": email}, {"$set": {"role": role}})

    def delete_user(self, user_id: ObjectId) -> DeleteResult:
        return self.collection.delete_one({"_id": user_id})

    def get_top_riders(self, field: str, limit: int = 5) -> List[Dict[str, Any]]:
        """Repartidores ordenados por `field` descendente, empates por orden de inserción"""
        cursor = (
            self.collection
            .find({"role": "Rider"}, RIDER_PROJECTION)
            .sort([(field, DESCENDING), ("_id", ASCENDING)])
            .limit(limit)
        )
        return list(cursor)
