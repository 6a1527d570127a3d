# app/modules/bookings/router.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from pymongo.database import Database

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user, get_admin_user
from app.shared.schemas.common import InsertResponse, UpdateResponse
from .service import BookingsService
from .schemas import BookingCreateRequest, BookingUpdateRequest

router = APIRouter()

@router.post("/bookings", response_model=InsertResponse)
async def create_booking(
    booking_data: BookingCreateRequest,
    current_user = Depends(get_current_user),
    db: Database = Depends(get_db)
):
    """
    Crear un nuevo envío

    **Reglas:**
    - weight, deliveryLat y deliveryLon se convierten a número
    - Tarifa: hasta 1kg = 50, hasta 2kg = 100, más de 2kg = 150
    - Estado inicial Pending, sin repartidor ni fecha aproximada
    - bookingDate = fecha actual (YYYY-MM-DD)
    """
    service = BookingsService(db)
    return await service.create_booking(booking_data)

@router.get("/bookings")
async def get_bookings(
    dateFrom: Optional[date] = Query(None, description="Desde (YYYY-MM-DD)"),
    dateTo: Optional[date] = Query(None, description="Hasta (YYYY-MM-DD)"),
    current_user = Depends(get_admin_user),
    db: Database = Depends(get_db)
):
    """
    Listado resumido de envíos (solo administradores)

    Si se envían ambas fechas se filtra por bookingDate en el rango inclusivo.
    """
    service = BookingsService(db)
    return await service.get_bookings(dateFrom, dateTo)

@router.get("/bookings/{email}")
async def get_bookings_by_email(
    email: str = Path(..., description="Email del remitente"),
    current_user = Depends(get_current_user),
    db: Database = Depends(get_db)
):
    """Envíos de un remitente"""
    service = BookingsService(db)
    return await service.get_bookings_by_email(email)

@router.get("/my-consignments/{uId}")
async def get_my_consignments(
    uId: str = Path(..., description="ID del repartidor"),
    current_user = Depends(get_current_user),
    db: Database = Depends(get_db)
):
    """Envíos asignados a un repartidor"""
    service = BookingsService(db)
    return await service.get_consignments(uId)

@router.get("/booking/{id}")
async def get_booking(
    id: str = Path(..., description="ID del envío"),
    current_user = Depends(get_current_user),
    db: Database = Depends(get_db)
):
    service = BookingsService(db)
    return await service.get_booking(id)

@router.patch("/bookings/{id}", response_model=UpdateResponse)
async def update_booking(
    update_data: BookingUpdateRequest,
    id: str = Path(..., description="ID del envío"),
    current_user = Depends(get_current_user),
    db: Database = Depends(get_db)
):
    """
    Actualización parcial de un envío

    **Campos permitidos:** status, deliveryMen, approxDeliveryDate
    """
    service = BookingsService(db)
    return await service.update_booking(id, update_data)
