# app/modules/bookings/repository.py
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.results import InsertOneResult
from bson import ObjectId
from typing import List, Dict, Any, Optional

from app.config.database import BOOKINGS, USERS

# Proyección del listado administrativo
SUMMARY_PROJECTION = {
    "name": 1,
    "phone": 1,
    "bookingDate": 1,
    "reqDeliveryDate": 1,
    "deliveryFee": 1,
    "status": 1,
}

# Proyección operativa para el repartidor (sin datos de contacto del remitente)
CONSIGNMENT_PROJECTION = {
    "name": 1,
    "receiverName": 1,
    "receiverPhone": 1,
    "reqDeliveryDate": 1,
    "approxDeliveryDate": 1,
    "deliveryAddress": 1,
    "deliveryLat": 1,
    "deliveryLon": 1,
    "status": 1,
}

class BookingsRepository:
    def __init__(self, db: Database):
        self.db = db
        self.collection = db[BOOKINGS]

    def create_booking(self, booking_data: Dict[str, Any]) -> InsertOneResult:
        """Crear nuevo envío"""
        return self.collection.insert_one(booking_data)

    def get_bookings(self, date_from: Optional[str] = None, date_to: Optional[str] = None) -> List[Dict[str, Any]]:
        """Listado resumido, opcionalmente filtrado por fecha de reserva"""
        query: Dict[str, Any] = {}
        if date_from and date_to:
            query = {
                "$and": [
                    {"bookingDate": {"$gte": date_from}},
                    {"bookingDate": {"$lte": date_to}},
                ]
            }
        return list(self.collection.find(query, SUMMARY_PROJECTION))

    def get_bookings_by_email(self, email: str) -> List[Dict[str, Any]]:
        """Envíos de un remitente"""
        return list(self.collection.find({"email": email}))

    def get_bookings_by_rider(self, rider_id: str) -> List[Dict[str, Any]]:
        """Consignaciones asignadas a un repartidor"""
        return list(self.collection.find({"deliveryMen": rider_id}, CONSIGNMENT_PROJECTION))

    def get_booking(self, booking_id: ObjectId) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"_id": booking_id})

    def update_booking(self, booking_id: ObjectId, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Aplicar cambios y devolver el documento previo"""
        return self.collection.find_one_and_update(
            {"_id": booking_id},
            {"$set": fields},
            return_document=ReturnDocument.BEFORE
        )

    def increment_rider_deliveries(self, rider_id: ObjectId, amount: int = 1) -> None:
        self.db[USERS].update_one({"_id": rider_id}, {"$inc": {"deliveryCount": amount}})
