# app/modules/stats/__init__.py
"""
Módulo de Estadísticas - Contadores para el dashboard
"""

from .router import router
from .service import StatsService
from .repository import StatsRepository

__all__ = [
    "router",
    "StatsService",
    "StatsRepository"
]
