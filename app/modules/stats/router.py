# app/modules/stats/router.py
from fastapi import APIRouter, Depends
from pymongo.database import Database

from app.config.database import get_db
from .service import StatsService
from .schemas import CounterResponse

router = APIRouter()

@router.get("/counter", response_model=CounterResponse)
async def get_counter(db: Database = Depends(get_db)):
    """
    Contadores del dashboard

    - bookingCount: total estimado de envíos
    - deliveryCount: envíos con estado Delivered
    - userCount: usuarios con rol User
    """
    service = StatsService(db)
    return await service.get_counters()
