# app/modules/coverage/service.py
from typing import Any, Dict, List

from pymongo.database import Database

from .repository import CoverageRepository
from app.shared.database.documents import serialize_many


class CoverageService:
    def __init__(self, db: Database):
        self.db = db
        self.repository = CoverageRepository(db)

    async def get_areas(self, page: int, limit: int) -> List[Dict[str, Any]]:
        # En Mongo limit(0) significa "sin límite"
        if limit == 0:
            return []
        return serialize_many(self.repository.get_areas(page * limit, limit))
