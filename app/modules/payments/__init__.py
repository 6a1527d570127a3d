# app/modules/payments/__init__.py
"""
Módulo de Pagos - Payment intents de Stripe

Arquitectura:
- router.py: Endpoint de creación de payment intent
- service.py: Conversión a unidades menores y llamada al proveedor
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import PaymentsService

__all__ = [
    "router",
    "PaymentsService"
]
