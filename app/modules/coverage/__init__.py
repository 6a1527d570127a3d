# app/modules/coverage/__init__.py
"""
Módulo de Cobertura - Zonas de servicio (solo lectura, paginado)
"""

from .router import router
from .service import CoverageService
from .repository import CoverageRepository

__all__ = [
    "router",
    "CoverageService",
    "CoverageRepository"
]
