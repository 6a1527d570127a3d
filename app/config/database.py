# app/config/database.py
import logging
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from .settings import settings

logger = logging.getLogger(__name__)

# Nombres de colecciones
USERS = "users"
BOOKINGS = "bookings"
REVIEWS = "reviews"
COVERAGE = "coverage"

# Cliente único para todo el proceso (pymongo mantiene su propio pool)
client: Optional[MongoClient] = None


def connect() -> Database:
    """Crear el cliente, verificar conexión y asegurar índices"""
    global client

    if client is None:
        client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        )

    db = client[settings.db_name]
    db.command("ping")
    logger.info(f"✅ Conectado a MongoDB: {settings.mongodb_host}")

    ensure_indexes(db)
    return db


def ensure_indexes(db: Database) -> None:
    """Índices requeridos por la aplicación"""
    db[USERS].create_index([("email", ASCENDING)], unique=True)
    db[REVIEWS].create_index([("bookingId", ASCENDING)], unique=True)
    db[REVIEWS].create_index([("deliveryMenId", ASCENDING)])
    db[BOOKINGS].create_index([("email", ASCENDING)])
    db[BOOKINGS].create_index([("deliveryMen", ASCENDING)])
    db[BOOKINGS].create_index([("bookingDate", ASCENDING)])


def close() -> None:
    """Cerrar el cliente al apagar el servicio"""
    global client

    if client is not None:
        client.close()
        client = None
        logger.info("🔌 Conexión a MongoDB cerrada")


# Database dependency
def get_db() -> Database:
    """Database dependency for FastAPI"""
    if client is None:
        raise RuntimeError("MongoDB client is not initialized")
    return client[settings.db_name]
