# app/api/v1/router.py
from fastapi import APIRouter, Depends
from pymongo.database import Database

from app.config.database import get_db
from app.config.settings import settings
from app.api.v1.auth import router as auth_router
from app.modules.bookings.router import router as bookings_router
from app.modules.users.router import router as users_router
from app.modules.reviews.router import router as reviews_router
from app.modules.coverage.router import router as coverage_router
from app.modules.stats.router import router as stats_router
from app.modules.payments.router import router as payments_router

# Router principal de la API
api_router = APIRouter()

api_router.include_router(auth_router)

api_router.include_router(
    bookings_router,
    tags=["Bookings"]
)

api_router.include_router(
    users_router,
    tags=["Users"]
)

api_router.include_router(
    reviews_router,
    tags=["Reviews"]
)

api_router.include_router(
    coverage_router,
    tags=["Coverage"]
)

api_router.include_router(
    stats_router,
    tags=["Stats"]
)

api_router.include_router(
    payments_router,
    tags=["Payments"]
)

@api_router.get("/health")
async def health_check(db: Database = Depends(get_db)):
    """Health check con verificación de la base de datos"""
    db.command("ping")
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
        "database": "mongodb",
        "modules": ["auth", "bookings", "users", "reviews", "coverage", "stats", "payments"]
    }
