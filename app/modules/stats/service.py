# app/modules/stats/service.py
from pymongo.database import Database

from .repository import StatsRepository
from .schemas import CounterResponse


class StatsService:
    def __init__(self, db: Database):
        self.db = db
        self.repository = StatsRepository(db)

    async def get_counters(self) -> CounterResponse:
        return CounterResponse(
            bookingCount=self.repository.estimated_booking_count(),
            deliveryCount=self.repository.count_bookings_by_status("Delivered"),
            userCount=self.repository.count_users_by_role("User"),
        )
