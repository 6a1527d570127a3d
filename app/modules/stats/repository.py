# app/modules/stats/repository.py
from pymongo.database import Database

from app.config.database import BOOKINGS, USERS

class StatsRepository:
    def __init__(self, db: Database):
        self.db = db

    def estimated_booking_count(self) -> int:
        return self.db[BOOKINGS].estimated_document_count()

    def count_bookings_by_status(self, status: str) -> int:
        return self.db[BOOKINGS].count_documents({"status": status})

    def count_users_by_role(self, role: str) -> int:
        return self.db[USERS].count_documents({"role": role})
