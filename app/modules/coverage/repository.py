# app/modules/coverage/repository.py
from pymongo.database import Database
from typing import List, Dict, Any

from app.config.database import COVERAGE

class CoverageRepository:
    def __init__(self, db: Database):
        self.db = db
        self.collection = db[COVERAGE]

    def get_areas(self, skip: int, limit: int) -> List[Dict[str, Any]]:
        """Zonas en el orden natural de la colección"""
        return list(self.collection.find({}).skip(skip).limit(limit))
