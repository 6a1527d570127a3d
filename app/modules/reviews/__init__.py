# app/modules/reviews/__init__.py
"""
Módulo de Reseñas - Una reseña por envío

- Alta o reemplazo de la reseña de un envío
- Recalculo del promedio de calificación del repartidor
- Reseñas recibidas por repartidor
"""

from .router import router
from .service import ReviewsService
from .repository import ReviewsRepository

__all__ = [
    "router",
    "ReviewsService",
    "ReviewsRepository"
]
