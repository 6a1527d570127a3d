# app/modules/bookings/service.py
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from pymongo.database import Database

from .repository import BookingsRepository
from .schemas import BookingCreateRequest, BookingUpdateRequest
from app.shared.database.documents import (
    insert_result, serialize, serialize_many, to_object_id, try_object_id
)

logger = logging.getLogger(__name__)

DELIVERED = "Delivered"


def calculate_delivery_fee(weight: float) -> int:
    """Tarifa fija por tramos de peso"""
    if weight <= 1:
        return 50
    if weight <= 2:
        return 100
    return 150


class BookingsService:
    def __init__(self, db: Database):
        self.db = db
        self.repository = BookingsRepository(db)

    async def create_booking(self, booking_data: BookingCreateRequest) -> Dict[str, Any]:
        """Crear envío en estado Pending con tarifa calculada"""
        booking = booking_data.model_dump()
        booking.update({
            "deliveryFee": calculate_delivery_fee(booking_data.weight),
            "deliveryMen": None,
            "approxDeliveryDate": None,
            "status": "Pending",
            "bookingDate": date.today().isoformat(),
        })

        result = self.repository.create_booking(booking)
        logger.info(f"📦 Envío creado {result.inserted_id} - tarifa {booking['deliveryFee']}")
        return insert_result(result)

    async def get_bookings(self, date_from: Optional[date], date_to: Optional[date]) -> List[Dict[str, Any]]:
        bookings = self.repository.get_bookings(
            date_from.isoformat() if date_from else None,
            date_to.isoformat() if date_to else None
        )
        return serialize_many(bookings)

    async def get_bookings_by_email(self, email: str) -> List[Dict[str, Any]]:
        return serialize_many(self.repository.get_bookings_by_email(email))

    async def get_consignments(self, rider_id: str) -> List[Dict[str, Any]]:
        return serialize_many(self.repository.get_bookings_by_rider(rider_id))

    async def get_booking(self, booking_id: str) -> Dict[str, Any]:
        booking = self.repository.get_booking(to_object_id(booking_id))
        if booking is None:
            raise HTTPException(status_code=404, detail="Booking not found")
        return serialize(booking)

    async def update_booking(self, booking_id: str, update_data: BookingUpdateRequest) -> Dict[str, Any]:
        """
        Actualizar estado, repartidor o fecha aproximada

        deliveryCount de cada repartidor refleja los envíos Delivered que
        tiene asignados: se ajusta al entrar o salir de Delivered y al
        reasignar un envío ya entregado.
        """
        oid = to_object_id(booking_id)
        fields = update_data.model_dump(exclude_unset=True)
        if not fields:
            raise HTTPException(status_code=400, detail="No fields to update")

        previous = self.repository.update_booking(oid, fields)
        if previous is None:
            raise HTTPException(status_code=404, detail="Booking not found")

        modified = any(previous.get(key) != value for key, value in fields.items())

        self._sync_rider_deliveries(previous, fields)

        return {
            "acknowledged": True,
            "matchedCount": 1,
            "modifiedCount": 1 if modified else 0,
            "upsertedId": None,
        }

    def _sync_rider_deliveries(self, previous: Dict[str, Any], fields: Dict[str, Any]) -> None:
        old_rider = try_object_id(previous.get("deliveryMen"))
        new_rider = try_object_id(fields.get("deliveryMen", previous.get("deliveryMen")))
        was_delivered = previous.get("status") == DELIVERED and old_rider is not None
        is_delivered = fields.get("status", previous.get("status")) == DELIVERED and new_rider is not None

        if was_delivered and (not is_delivered or old_rider != new_rider):
            self.repository.increment_rider_deliveries(old_rider, -1)
            logger.info(f"🚚 Entrega descontada al repartidor {old_rider}")

        if is_delivered and (not was_delivered or old_rider != new_rider):
            self.repository.increment_rider_deliveries(new_rider)
            logger.info(f"🚚 Entrega registrada para repartidor {new_rider}")
