# app/modules/bookings/__init__.py
"""
Módulo de Envíos - Registro de Reservas de Entrega

Este módulo maneja el ciclo de vida de los envíos:
- Creación de envíos con tarifa calculada por peso
- Listado general (admin) con filtro por rango de fechas
- Envíos por cliente y consignaciones por repartidor
- Actualización de estado, repartidor y fecha aproximada

Arquitectura:
- router.py: Endpoints de envíos
- service.py: Lógica de negocio de envíos
- repository.py: Acceso a datos de envíos
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import BookingsService
from .repository import BookingsRepository

__all__ = [
    "router",
    "BookingsService",
    "BookingsRepository"
]
